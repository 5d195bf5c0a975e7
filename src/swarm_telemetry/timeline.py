"""Placement of per-swarm battery averages on the timeline chart."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from swarm_telemetry.config import TimelineSettings
from swarm_telemetry.models import AggregatePoint


@dataclass(frozen=True, slots=True)
class ChartPoint:
    timepoint: str
    swarm_id: int
    avg_battery: float
    x: float
    y: float


class TimelineLayout:
    def __init__(self, points: Sequence[AggregatePoint], settings: TimelineSettings | None = None) -> None:
        self.points = list(points)
        self.settings = settings or TimelineSettings()
        self.timepoints = sorted({p.timepoint for p in self.points})
        self._columns = {tp: i for i, tp in enumerate(self.timepoints)}
        self.battery_max = self.settings.battery_ceiling
        self.battery_min = (
            min(p.avg_battery for p in self.points) - self.settings.battery_headroom
            if self.points
            else self.battery_max - self.settings.battery_headroom
        )

    def scale_x(self, column: int) -> float:
        canvas = self.settings.canvas
        if len(self.timepoints) <= 1:
            return canvas.margins.left + canvas.interior_width / 2
        return canvas.margins.left + canvas.interior_width / (len(self.timepoints) - 1) * column

    def scale_y(self, battery: float) -> float:
        canvas = self.settings.canvas
        span = self.battery_max - self.battery_min
        if span == 0:
            return canvas.margins.top + canvas.interior_height / 2
        return canvas.margins.top + canvas.interior_height - (battery - self.battery_min) / span * canvas.interior_height

    def place(self, point: AggregatePoint) -> ChartPoint:
        return ChartPoint(
            timepoint=point.timepoint,
            swarm_id=point.swarm_id,
            avg_battery=point.avg_battery,
            x=self.scale_x(self._columns[point.timepoint]),
            y=self.scale_y(point.avg_battery),
        )

    def series(self) -> dict[int, list[ChartPoint]]:
        """Chart points grouped per swarm, swarms ascending, points in time order."""
        grouped: dict[int, list[ChartPoint]] = {}
        for point in sorted(self.points, key=lambda p: (p.swarm_id, p.timepoint)):
            grouped.setdefault(point.swarm_id, []).append(self.place(point))
        return grouped

    def y_ticks(self, count: int = 5) -> list[tuple[float, float]]:
        """(pixel y, battery value) pairs for evenly spaced gridlines, top to bottom."""
        canvas = self.settings.canvas
        step = (self.battery_max - self.battery_min) / count
        return [
            (canvas.margins.top + canvas.interior_height / count * i, self.battery_max - step * i)
            for i in range(count + 1)
        ]
