from swarm_telemetry.data.contract import UNASSIGNED_SWARM

# Open vocabularies: unknown keys fall back instead of failing.
STATE_COLORS = {
    "Taking Off": "#FFC0CB",
    "Entering Swarm": "#ADD8E6",
    "Hovering": "#90EE90",
    "Passing By": "#FDFD96",
    "Attacking": "#FFB6C1",
    "Parachute Deployment": "#FFD700",
}
STATE_FALLBACK_COLOR = "#CCCCCC"

SWARM_COLORS = {
    UNASSIGNED_SWARM: "#778899",
    1: "#007BFF",
    2: "#DC3545",
    3: "#28A745",
}
SWARM_FALLBACK_COLOR = "#999999"


def state_color(state: str) -> str:
    return STATE_COLORS.get(state, STATE_FALLBACK_COLOR)


def swarm_color(swarm_id: int) -> str:
    return SWARM_COLORS.get(swarm_id, SWARM_FALLBACK_COLOR)


def swarm_label(swarm_id: int) -> str:
    return "Swarm Unassigned" if swarm_id == UNASSIGNED_SWARM else f"Swarm {swarm_id}"
