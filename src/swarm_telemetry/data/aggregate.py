"""Time-ordered and per-frame aggregates derived from telemetry records."""

from __future__ import annotations

from typing import Sequence

from swarm_telemetry.data.contract import SIGNAL_LEVELS
from swarm_telemetry.models import AggregatePoint, CommStats, DatasetSummary, TelemetryRecord, VideoFeedback


def swarm_battery_timeline(records: Sequence[TelemetryRecord]) -> list[AggregatePoint]:
    """Average battery per (timepoint, swarm), ordered by timepoint then swarm id.

    Only pairs with at least one record are emitted. No rounding is applied.
    """
    buckets: dict[tuple[str, int], list[float]] = {}
    for record in records:
        buckets.setdefault((record.timepoint, record.swarm_id), []).append(record.battery_pct)

    # Tuple sort gives string order on timepoints, numeric order on swarm ids (-1 first).
    return [
        AggregatePoint(timepoint=tp, swarm_id=swarm_id, avg_battery=sum(values) / len(values))
        for (tp, swarm_id), values in sorted(buckets.items())
    ]


def _signal_key(value: float) -> int | float:
    return int(value) if value.is_integer() else value


def comm_stats(records: Sequence[TelemetryRecord]) -> CommStats:
    """Signal intensity distribution and video feedback counts for one frame."""
    stats = CommStats()
    signals = [r.signal_intensity for r in records if r.signal_intensity is not None]
    for value in signals:
        key = _signal_key(value)
        stats.signal_counts[key] = stats.signal_counts.get(key, 0) + 1

    total = sum(stats.signal_counts.values())
    for level in SIGNAL_LEVELS:
        count = stats.signal_counts.get(level, 0)
        stats.signal_share_pct[level] = (count / total) * 100 if total > 0 else 0.0

    if signals:
        stats.avg_signal = sum(signals) / len(signals)

    for record in records:
        if record.video_feedback is VideoFeedback.ON:
            stats.video_on += 1
        elif record.video_feedback is VideoFeedback.OFF:
            stats.video_off += 1
    return stats


def summarize(records: Sequence[TelemetryRecord]) -> DatasetSummary:
    return DatasetSummary(
        record_count=len(records),
        timepoint_count=len({r.timepoint for r in records}),
        drone_count=len({r.drone_id for r in records}),
        swarm_ids=sorted({r.swarm_id for r in records}),
    )
