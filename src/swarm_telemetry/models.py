from dataclasses import dataclass, field
from enum import Enum

from swarm_telemetry.data.contract import UNASSIGNED_SWARM, UNKNOWN_STATE


class VideoFeedback(str, Enum):
    ON = "on"
    OFF = "off"


@dataclass(frozen=True, slots=True)
class TaskId:
    """Task reference that is either a task number or a free-form label."""

    number: int | None = None
    label: str | None = None

    def __post_init__(self) -> None:
        if (self.number is None) == (self.label is None):
            raise ValueError("TaskId needs exactly one of number or label")

    @property
    def kind(self) -> str:
        return "number" if self.number is not None else "label"

    @property
    def value(self) -> int | str:
        return self.number if self.number is not None else self.label  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True, slots=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, slots=True)
class Attitude:
    pitch: float = 0.0
    roll: float = 0.0
    yaw: float = 0.0


@dataclass(frozen=True, slots=True)
class TelemetryRecord:
    drone_id: int
    timepoint: str
    swarm_id: int = UNASSIGNED_SWARM
    task_id: TaskId = field(default_factory=lambda: TaskId(label=""))
    state: str = UNKNOWN_STATE
    position: Vector3 = field(default_factory=Vector3)
    velocity: Vector3 = field(default_factory=Vector3)
    attitude: Attitude = field(default_factory=Attitude)
    battery_pct: float = 0.0
    detection_range: float = 0.0
    signal_intensity: float | None = None
    video_feedback: VideoFeedback | None = None

    @property
    def key(self) -> tuple[int, str]:
        return self.drone_id, self.timepoint

    @property
    def is_unassigned(self) -> bool:
        return self.swarm_id == UNASSIGNED_SWARM


@dataclass(frozen=True, slots=True)
class AggregatePoint:
    timepoint: str
    swarm_id: int
    avg_battery: float


@dataclass(frozen=True, slots=True)
class Bounds:
    """World-space extent used to scale one frame onto the drawing surface."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float
    z_max: float


@dataclass(frozen=True, slots=True)
class ProjectedPoint:
    x: float
    y: float
    battery_radius: float
    range_radius: float
    range_opacity: float
    velocity: Vector2

    @property
    def arrow_tip(self) -> Vector2:
        return Vector2(self.x + self.velocity.x, self.y + self.velocity.y)


@dataclass(frozen=True, slots=True)
class GridCell:
    x: float
    y: float
    width: float
    height: float
    state: str
    color: str


@dataclass(frozen=True, slots=True)
class Frame:
    timepoint: str
    records: tuple[TelemetryRecord, ...] = ()


@dataclass(slots=True)
class CommStats:
    signal_counts: dict[int | float, int] = field(default_factory=dict)
    signal_share_pct: dict[int, float] = field(default_factory=dict)
    avg_signal: float | None = None
    video_on: int = 0
    video_off: int = 0

    @property
    def video_total(self) -> int:
        return self.video_on + self.video_off


@dataclass(slots=True)
class DatasetSummary:
    record_count: int
    timepoint_count: int
    drone_count: int
    swarm_ids: list[int] = field(default_factory=list)
