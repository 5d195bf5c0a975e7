"""Column contract for the drone swarm telemetry CSV export."""

from __future__ import annotations

# Labels are matched verbatim, including the source's own spelling and unit suffixes.
DRONE_ID = "DroneID"
TIME_POINT = "TimePoint"
SWARM_ID = "SwarmID"
TASK_ID = "TaskID"
STATE = "State"
POSITION_X = "PositionX"
POSITION_Y = "PositionY"
POSITION_Z = "PositionZ"
VELOCITY_X = "VelocityX"
VELOCITY_Y = "VelocityY"
VELOCITY_Z = "VelocityZ"
PITCH = "Pitch"
ROLL = "Roll"
YAW = "Yaw"
BATTERY_PERCENTAGE = "Battery Percentage"
DETECTION_RANGE = "Detection Range(Circle)"
SIGNAL_INTENSITY = "Singal Intensity(At most 5)"
VIDEO_FEEDBACK = "Video FeedbackOn"

# Raw telemetry schema as exported by the swarm ground station.
RAW_TELEMETRY_COLUMNS = [
    DRONE_ID,  # Non-negative drone identifier.
    TIME_POINT,  # Opaque, string-sortable observation label.
    SWARM_ID,  # Swarm membership; -1 when unassigned.
    TASK_ID,  # Numeric task id or free-form task label.
    STATE,  # Semantic state label (open vocabulary).
    POSITION_X,  # Ground position x.
    POSITION_Y,  # Ground position y.
    POSITION_Z,  # Altitude.
    VELOCITY_X,  # Velocity x component.
    VELOCITY_Y,  # Velocity y component.
    VELOCITY_Z,  # Velocity z component.
    PITCH,  # Pitch in degrees.
    ROLL,  # Roll in degrees.
    YAW,  # Yaw in degrees.
    BATTERY_PERCENTAGE,  # Battery level, nominally 0-100.
    DETECTION_RANGE,  # Detection radius.
    SIGNAL_INTENSITY,  # Optional link quality level 1-5.
    VIDEO_FEEDBACK,  # Optional "Yes"/"No" video downlink flag.
]

REQUIRED_HEADER_COLUMNS = (DRONE_ID, TIME_POINT)

# Rows narrower than this are incomplete exports and are skipped.
MIN_ROW_COLUMNS = 16

# Rows starting with this marker are withheld placeholder records.
WITHHELD_ROW_MARKER = '"-1'

UNASSIGNED_SWARM = -1
UNKNOWN_STATE = "Unknown"
VIDEO_AFFIRMATIVE = "yes"

SIGNAL_LEVELS = (5, 4, 3, 2, 1)

# Human-readable schema dictionary for docs and CLI output.
COLUMN_DESCRIPTIONS = {
    DRONE_ID: "Identifier for the drone that produced the record.",
    TIME_POINT: "Observation label shared across drones; sorts chronologically as a string.",
    SWARM_ID: "Swarm the drone belongs to, -1 when unassigned.",
    TASK_ID: "Task number, or a free-form task label when not numeric.",
    STATE: "Semantic drone state such as Hovering or Attacking.",
    POSITION_X: "Position along the ground x axis.",
    POSITION_Y: "Position along the ground y axis.",
    POSITION_Z: "Altitude above ground.",
    VELOCITY_X: "Velocity along x.",
    VELOCITY_Y: "Velocity along y.",
    VELOCITY_Z: "Velocity along z.",
    PITCH: "Pitch angle in degrees.",
    ROLL: "Roll angle in degrees.",
    YAW: "Yaw angle in degrees.",
    BATTERY_PERCENTAGE: "Remaining battery percentage, not clamped.",
    DETECTION_RANGE: "Radius of the drone's detection circle.",
    SIGNAL_INTENSITY: "Signal intensity level from 1 to 5 when reported.",
    VIDEO_FEEDBACK: "Whether the video feedback link is on, when reported.",
}
