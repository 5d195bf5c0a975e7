import os
from dataclasses import dataclass, field
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScalingMode(str, Enum):
    DATA_RELATIVE = "data_relative"
    FIXED_SCALE = "fixed_scale"


class Margins(BaseModel):
    model_config = ConfigDict(frozen=True)

    top: float = Field(0.0, ge=0)
    right: float = Field(0.0, ge=0)
    bottom: float = Field(0.0, ge=0)
    left: float = Field(0.0, ge=0)


class CanvasSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = Field(..., gt=0, description="Drawing surface width in pixels")
    height: float = Field(..., gt=0, description="Drawing surface height in pixels")
    margins: Margins = Field(default_factory=Margins)

    @property
    def interior_width(self) -> float:
        return max(0.0, self.width - self.margins.left - self.margins.right)

    @property
    def interior_height(self) -> float:
        return max(0.0, self.height - self.margins.top - self.margins.bottom)


class WorldRange(BaseModel):
    """Declared world extent used by the fixed-scale projector."""

    model_config = ConfigDict(frozen=True)

    x_min: float = 0.0
    x_max: float = 100.0
    y_min: float = 0.0
    y_max: float = 100.0
    z_max: float = 100.0

    @model_validator(mode="after")
    def _check_extent(self) -> "WorldRange":
        if self.x_max <= self.x_min or self.y_max <= self.y_min:
            raise ValueError("world range max must be greater than min on x and y")
        return self


class ProjectionSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Bottom margin leaves room for the depth offset lifting drones upward.
    canvas: CanvasSpec = Field(
        default_factory=lambda: CanvasSpec(width=900, height=600, margins=Margins(top=50, right=50, bottom=100, left=50))
    )
    mode: ScalingMode = ScalingMode.DATA_RELATIVE
    world: WorldRange = Field(default_factory=WorldRange)
    frame_padding: float = Field(0.0, ge=0, description="World units added around data-relative bounds")
    depth_px: float = Field(50.0, ge=0, description="Pixel lift at the frame's maximum altitude")
    battery_floor: float = Field(5.0, gt=0)
    battery_scale: float = Field(15.0, ge=0)
    range_floor: float = Field(20.0, ge=0)
    range_scale: float = Field(40.0, ge=0)
    range_opacity: float = Field(0.1, ge=0, le=1)
    velocity_scale: float = Field(20.0, ge=0)


class HeatmapSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    canvas: CanvasSpec = Field(
        default_factory=lambda: CanvasSpec(width=900, height=500, margins=Margins(top=60, right=150, bottom=40, left=60))
    )


class TimelineSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    canvas: CanvasSpec = Field(
        default_factory=lambda: CanvasSpec(width=800, height=400, margins=Margins(top=40, right=40, bottom=60, left=60))
    )
    battery_headroom: float = Field(5.0, ge=0, description="Percent below the lowest average kept visible")
    battery_ceiling: float = 100.0


@dataclass(frozen=True, slots=True)
class Settings:
    projection: ProjectionSettings = field(default_factory=ProjectionSettings)
    heatmap: HeatmapSettings = field(default_factory=HeatmapSettings)
    timeline: TimelineSettings = field(default_factory=TimelineSettings)


SETTINGS = Settings()


def load_settings() -> Settings:
    """Build settings from defaults overridden by SWARM_TELEMETRY_* environment variables."""
    load_dotenv()
    mode = ScalingMode(os.getenv("SWARM_TELEMETRY_SCALING_MODE", ScalingMode.DATA_RELATIVE.value).lower())
    defaults = WorldRange()
    world_min = float(os.getenv("SWARM_TELEMETRY_WORLD_MIN", defaults.x_min))
    world_max = float(os.getenv("SWARM_TELEMETRY_WORLD_MAX", defaults.x_max))
    world = WorldRange(
        x_min=world_min,
        x_max=world_max,
        y_min=world_min,
        y_max=world_max,
        z_max=float(os.getenv("SWARM_TELEMETRY_WORLD_Z_MAX", defaults.z_max)),
    )
    return Settings(projection=ProjectionSettings(mode=mode, world=world))
