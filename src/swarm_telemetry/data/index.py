"""Sorted universes and O(1) lookups over an immutable record batch."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from swarm_telemetry.models import Frame, TelemetryRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TelemetryIndex:
    timepoints: tuple[str, ...] = ()
    drone_ids: tuple[int, ...] = ()
    swarm_ids: tuple[int, ...] = ()
    _by_timepoint: dict[str, tuple[TelemetryRecord, ...]] = field(default_factory=dict, repr=False)
    _by_key: dict[tuple[int, str], TelemetryRecord] = field(default_factory=dict, repr=False)

    def records_at(self, timepoint: str) -> tuple[TelemetryRecord, ...]:
        return self._by_timepoint.get(timepoint, ())

    def lookup(self, drone_id: int, timepoint: str) -> TelemetryRecord | None:
        return self._by_key.get((drone_id, timepoint))

    def frame_at(self, index: int) -> Frame:
        """Return the frame at a playback position; out-of-range positions are empty frames."""
        if not 0 <= index < len(self.timepoints):
            return Frame(timepoint="")
        timepoint = self.timepoints[index]
        return Frame(timepoint=timepoint, records=self.records_at(timepoint))

    def __len__(self) -> int:
        return len(self.timepoints)


def build_index(records: Sequence[TelemetryRecord]) -> TelemetryIndex:
    buckets: dict[str, list[TelemetryRecord]] = {}
    by_key: dict[tuple[int, str], TelemetryRecord] = {}
    drone_ids: set[int] = set()
    swarm_ids: set[int] = set()

    for record in records:
        buckets.setdefault(record.timepoint, []).append(record)
        # Duplicate (drone, timepoint) rows: the last parsed row wins.
        by_key[record.key] = record
        drone_ids.add(record.drone_id)
        swarm_ids.add(record.swarm_id)

    index = TelemetryIndex(
        timepoints=tuple(sorted(buckets)),
        drone_ids=tuple(sorted(drone_ids)),
        swarm_ids=tuple(sorted(swarm_ids)),
        _by_timepoint={tp: tuple(bucket) for tp, bucket in buckets.items()},
        _by_key=by_key,
    )
    logger.debug(
        "Indexed %d records: %d timepoints, %d drones, %d swarms",
        len(records),
        len(index.timepoints),
        len(index.drone_ids),
        len(index.swarm_ids),
    )
    return index
