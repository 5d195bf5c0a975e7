"""Cell geometry for the drone-by-timepoint state heatmap."""

from __future__ import annotations

from typing import Iterator

from swarm_telemetry.config import HeatmapSettings
from swarm_telemetry.data.index import TelemetryIndex
from swarm_telemetry.models import GridCell
from swarm_telemetry.palette import state_color


class HeatmapLayout:
    """Rows are drone ids, columns are timepoints, both in index order."""

    def __init__(self, index: TelemetryIndex, settings: HeatmapSettings | None = None) -> None:
        self.index = index
        self.settings = settings or HeatmapSettings()
        self._rows = {drone_id: row for row, drone_id in enumerate(index.drone_ids)}
        self._columns = {tp: col for col, tp in enumerate(index.timepoints)}

    @property
    def cell_width(self) -> float:
        if not self._columns:
            return 0.0
        return self.settings.canvas.interior_width / len(self._columns)

    @property
    def cell_height(self) -> float:
        if not self._rows:
            return 0.0
        return self.settings.canvas.interior_height / len(self._rows)

    def cell_origin(self, drone_id: int, timepoint: str) -> tuple[float, float] | None:
        row = self._rows.get(drone_id)
        col = self._columns.get(timepoint)
        if row is None or col is None:
            return None
        margins = self.settings.canvas.margins
        return margins.left + col * self.cell_width, margins.top + row * self.cell_height

    def grid_cell(self, drone_id: int, timepoint: str) -> GridCell | None:
        """Cell for a (drone, timepoint) pair, or None when no record was observed."""
        record = self.index.lookup(drone_id, timepoint)
        origin = self.cell_origin(drone_id, timepoint)
        if record is None or origin is None:
            return None
        x, y = origin
        return GridCell(
            x=x,
            y=y,
            width=self.cell_width,
            height=self.cell_height,
            state=record.state,
            color=state_color(record.state),
        )

    def cells(self) -> Iterator[GridCell]:
        for drone_id in self.index.drone_ids:
            for timepoint in self.index.timepoints:
                cell = self.grid_cell(drone_id, timepoint)
                if cell is not None:
                    yield cell

    def legend(self) -> list[tuple[str, str]]:
        """(state, color) pairs in first-seen order across the painted cells."""
        seen: dict[str, str] = {}
        for cell in self.cells():
            seen.setdefault(cell.state, cell.color)
        return list(seen.items())
