"""Map telemetry records onto a 2D drawing surface with a pseudo-3D depth cue.

Two scaling policies are supported:

* data-relative: bounds come from the records of the frame being drawn, so the
  frame always fills the surface;
* fixed-scale: bounds come from a declared world range, so positions stay
  aligned with a static background across frames.

Both share the same affine map. Drawing-surface y grows downward; the depth
offset lifts higher-altitude drones upward by up to ``depth_px`` pixels.
"""

from __future__ import annotations

from typing import Sequence

from swarm_telemetry.config import ProjectionSettings, ScalingMode
from swarm_telemetry.models import Bounds, ProjectedPoint, TelemetryRecord, Vector2


def frame_bounds(records: Sequence[TelemetryRecord], padding: float = 0.0) -> Bounds:
    """Data-relative bounds of a frame, widened by ``padding`` world units."""
    if not records:
        return Bounds(0.0, 0.0, 0.0, 0.0, 0.0)
    xs = [r.position.x for r in records]
    ys = [r.position.y for r in records]
    return Bounds(
        x_min=min(xs) - padding,
        x_max=max(xs) + padding,
        y_min=min(ys) - padding,
        y_max=max(ys) + padding,
        z_max=max(r.position.z for r in records) + padding,
    )


def _scale(value: float, lo: float, hi: float, start: float, span: float) -> float:
    # A single distinct value maps to the centre of the span.
    if hi == lo:
        return start + span / 2
    return start + (value - lo) / (hi - lo) * span


def _unscale(pixel: float, lo: float, hi: float, start: float, span: float) -> float:
    if hi == lo or span == 0:
        return lo
    return lo + (pixel - start) / span * (hi - lo)


class Projector:
    def __init__(self, settings: ProjectionSettings | None = None) -> None:
        self.settings = settings or ProjectionSettings()

    @property
    def mode(self) -> ScalingMode:
        return self.settings.mode

    def world_bounds(self) -> Bounds:
        world = self.settings.world
        return Bounds(world.x_min, world.x_max, world.y_min, world.y_max, world.z_max)

    def bounds_for(self, frame_records: Sequence[TelemetryRecord]) -> Bounds:
        if self.mode is ScalingMode.FIXED_SCALE:
            return self.world_bounds()
        return frame_bounds(frame_records, self.settings.frame_padding)

    def depth_offset(self, z: float, bounds: Bounds) -> float:
        if bounds.z_max <= 0:
            return 0.0
        return z / bounds.z_max * self.settings.depth_px

    def to_surface(self, x: float, y: float, z: float, bounds: Bounds) -> tuple[float, float]:
        canvas = self.settings.canvas
        px = _scale(x, bounds.x_min, bounds.x_max, canvas.margins.left, canvas.interior_width)
        py = _scale(y, bounds.y_min, bounds.y_max, canvas.margins.top, canvas.interior_height)
        return px, py - self.depth_offset(z, bounds)

    def unproject_xy(self, px: float, py: float, z: float, bounds: Bounds) -> tuple[float, float]:
        """Invert ``to_surface`` for a known altitude. Degenerate axes return their bound."""
        canvas = self.settings.canvas
        x = _unscale(px, bounds.x_min, bounds.x_max, canvas.margins.left, canvas.interior_width)
        y = _unscale(
            py + self.depth_offset(z, bounds),
            bounds.y_min,
            bounds.y_max,
            canvas.margins.top,
            canvas.interior_height,
        )
        return x, y

    def battery_radius(self, battery_pct: float) -> float:
        s = self.settings
        return s.battery_floor + max(battery_pct, 0.0) / 100 * s.battery_scale

    def range_radius(self, detection_range: float) -> float:
        s = self.settings
        return s.range_floor + max(detection_range, 0.0) / 100 * s.range_scale

    def velocity_arrow(self, record: TelemetryRecord) -> Vector2:
        k = self.settings.velocity_scale
        # Domain y points up, surface y points down.
        return Vector2(record.velocity.x * k, -record.velocity.y * k)

    def project(self, record: TelemetryRecord, bounds: Bounds) -> ProjectedPoint:
        x, y = self.to_surface(record.position.x, record.position.y, record.position.z, bounds)
        return ProjectedPoint(
            x=x,
            y=y,
            battery_radius=self.battery_radius(record.battery_pct),
            range_radius=self.range_radius(record.detection_range),
            range_opacity=self.settings.range_opacity,
            velocity=self.velocity_arrow(record),
        )

    def project_frame(self, frame_records: Sequence[TelemetryRecord]) -> list[ProjectedPoint]:
        bounds = self.bounds_for(frame_records)
        return [self.project(record, bounds) for record in frame_records]
