"""Decode raw swarm telemetry CSV text into typed records."""

from __future__ import annotations

import csv
import logging
import math
import re
from pathlib import Path

from swarm_telemetry.data import contract as c
from swarm_telemetry.errors import TelemetryFormatError
from swarm_telemetry.models import Attitude, TaskId, TelemetryRecord, Vector3, VideoFeedback

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_int(raw: str | None) -> int | None:
    """Parse the leading integer of a cell, e.g. "3.0" -> 3. Returns None on failure."""
    if not raw:
        return None
    match = _INT_PREFIX.match(raw.strip())
    return int(match.group()) if match else None


def parse_float(raw: str | None) -> float | None:
    """Parse the leading decimal number of a cell. Words like "nan" and overflows are failures."""
    if not raw:
        return None
    match = _FLOAT_PREFIX.match(raw.strip())
    if not match:
        return None
    value = float(match.group())
    return value if math.isfinite(value) else None


def _float_or_zero(row: dict[str, str], label: str) -> float:
    # Unparseable numerics degrade to 0 so every record has concrete values.
    value = parse_float(row.get(label))
    return 0.0 if value is None else value


def _split_lines(text: str) -> list[str]:
    # Rows end at "\n" only; other Unicode line breaks may appear inside free-text cells.
    lines = (line.strip() for line in text.strip().split("\n"))
    return [line for line in lines if line]


def _read_header(line: str) -> dict[str, int]:
    labels = [label.strip() for label in next(csv.reader([line]))]
    # Later duplicate labels win, matching how the export tool builds its rows.
    columns = {label: idx for idx, label in enumerate(labels)}
    missing = [label for label in c.REQUIRED_HEADER_COLUMNS if label not in columns]
    if missing:
        raise TelemetryFormatError(f"Header row is missing required columns: {', '.join(missing)}")
    return columns


def _decode_row(values: list[str], columns: dict[str, int]) -> TelemetryRecord | None:
    row = {label: values[idx] for label, idx in columns.items() if idx < len(values)}

    raw_drone_id = row.get(c.DRONE_ID, "")
    timepoint = row.get(c.TIME_POINT, "")
    if not raw_drone_id or not timepoint:
        return None
    drone_id = parse_int(raw_drone_id)
    if drone_id is None or drone_id < 0:
        return None

    swarm_id = parse_int(row.get(c.SWARM_ID))
    raw_task = row.get(c.TASK_ID, "")
    task_number = parse_int(raw_task)

    raw_signal = row.get(c.SIGNAL_INTENSITY, "")
    raw_video = row.get(c.VIDEO_FEEDBACK, "")
    video: VideoFeedback | None = None
    if raw_video:
        video = VideoFeedback.ON if raw_video.lower() == c.VIDEO_AFFIRMATIVE else VideoFeedback.OFF

    return TelemetryRecord(
        drone_id=drone_id,
        timepoint=timepoint,
        swarm_id=c.UNASSIGNED_SWARM if swarm_id is None else swarm_id,
        task_id=TaskId(number=task_number) if task_number is not None else TaskId(label=raw_task),
        state=row.get(c.STATE) or c.UNKNOWN_STATE,
        position=Vector3(
            _float_or_zero(row, c.POSITION_X),
            _float_or_zero(row, c.POSITION_Y),
            _float_or_zero(row, c.POSITION_Z),
        ),
        velocity=Vector3(
            _float_or_zero(row, c.VELOCITY_X),
            _float_or_zero(row, c.VELOCITY_Y),
            _float_or_zero(row, c.VELOCITY_Z),
        ),
        attitude=Attitude(
            pitch=_float_or_zero(row, c.PITCH),
            roll=_float_or_zero(row, c.ROLL),
            yaw=_float_or_zero(row, c.YAW),
        ),
        battery_pct=_float_or_zero(row, c.BATTERY_PERCENTAGE),
        detection_range=_float_or_zero(row, c.DETECTION_RANGE),
        # Empty signal is absent, not zero.
        signal_intensity=parse_float(raw_signal) if raw_signal else None,
        video_feedback=video,
    )


def parse_records(text: str) -> list[TelemetryRecord]:
    """Decode CSV text into records in input order, silently skipping invalid rows.

    Raises TelemetryFormatError when there is no header row at all.
    """
    lines = _split_lines(text)
    if not lines:
        raise TelemetryFormatError("Telemetry input is empty; expected a header row")
    columns = _read_header(lines[0])

    records: list[TelemetryRecord] = []
    skipped = 0
    for line in lines[1:]:
        if line.startswith(c.WITHHELD_ROW_MARKER):
            skipped += 1
            continue
        values = [value.strip() for value in next(csv.reader([line]))]
        if len(values) < c.MIN_ROW_COLUMNS:
            skipped += 1
            continue
        record = _decode_row(values, columns)
        if record is None:
            skipped += 1
            continue
        records.append(record)

    logger.debug("Parsed %d telemetry rows: %d kept, %d skipped", len(lines) - 1, len(records), skipped)
    return records


def load_records(path: Path) -> list[TelemetryRecord]:
    """Read a UTF-8 telemetry export from disk and decode it."""
    text = Path(path).read_text(encoding="utf-8-sig")
    logger.debug("Loaded %d bytes of telemetry from %s", len(text), path)
    return parse_records(text)
