"""Read-only view over one telemetry batch, as consumed by a presentation layer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from swarm_telemetry.config import SETTINGS, Settings
from swarm_telemetry.data.aggregate import comm_stats, summarize, swarm_battery_timeline
from swarm_telemetry.data.index import build_index
from swarm_telemetry.data.parser import load_records, parse_records
from swarm_telemetry.heatmap import HeatmapLayout
from swarm_telemetry.models import (
    AggregatePoint,
    Bounds,
    CommStats,
    DatasetSummary,
    Frame,
    GridCell,
    ProjectedPoint,
    TelemetryRecord,
)
from swarm_telemetry.projector import Projector
from swarm_telemetry.timeline import TimelineLayout

logger = logging.getLogger(__name__)


class TelemetryPipeline:
    """Derived views over an immutable record batch.

    The batch is fixed at construction. Everything else is recomputed from it
    on demand, so frame-scoped results can be discarded freely between calls.
    """

    def __init__(self, records: Sequence[TelemetryRecord], settings: Settings | None = None) -> None:
        self.settings = settings or SETTINGS
        self._records = tuple(records)
        self.index = build_index(self._records)
        self.projector = Projector(self.settings.projection)
        self._timeline = swarm_battery_timeline(self._records)
        logger.debug("Pipeline ready with %d records", len(self._records))

    @classmethod
    def from_text(cls, text: str, settings: Settings | None = None) -> "TelemetryPipeline":
        return cls(parse_records(text), settings)

    @classmethod
    def from_path(cls, path: Path, settings: Settings | None = None) -> "TelemetryPipeline":
        return cls(load_records(path), settings)

    @property
    def records(self) -> tuple[TelemetryRecord, ...]:
        return self._records

    @property
    def timepoints(self) -> tuple[str, ...]:
        return self.index.timepoints

    def records_at(self, timepoint: str) -> tuple[TelemetryRecord, ...]:
        return self.index.records_at(timepoint)

    def frame_at(self, index: int) -> Frame:
        return self.index.frame_at(index)

    def timeline(self) -> list[AggregatePoint]:
        return list(self._timeline)

    def timeline_layout(self) -> TimelineLayout:
        return TimelineLayout(self._timeline, self.settings.timeline)

    def bounds_for(self, timepoint: str) -> Bounds:
        return self.projector.bounds_for(self.records_at(timepoint))

    def project(self, record: TelemetryRecord, bounds: Bounds | None = None) -> ProjectedPoint:
        """Project a record; without explicit bounds, use its own frame under the configured mode."""
        if bounds is None:
            bounds = self.bounds_for(record.timepoint)
        return self.projector.project(record, bounds)

    def project_frame(self, timepoint: str) -> list[tuple[TelemetryRecord, ProjectedPoint]]:
        frame = self.records_at(timepoint)
        return list(zip(frame, self.projector.project_frame(frame)))

    def heatmap(self) -> HeatmapLayout:
        return HeatmapLayout(self.index, self.settings.heatmap)

    def grid_cell(self, drone_id: int, timepoint: str) -> GridCell | None:
        return self.heatmap().grid_cell(drone_id, timepoint)

    def comm_stats(self, timepoint: str) -> CommStats:
        return comm_stats(self.records_at(timepoint))

    def summary(self) -> DatasetSummary:
        return summarize(self._records)
