import argparse
import json
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path
from typing import Any

from swarm_telemetry.config import ScalingMode, Settings, load_settings
from swarm_telemetry.data.contract import COLUMN_DESCRIPTIONS, RAW_TELEMETRY_COLUMNS
from swarm_telemetry.palette import swarm_color, swarm_label
from swarm_telemetry.pipeline import TelemetryPipeline

logger = logging.getLogger("swarm_telemetry.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _summary(pipeline: TelemetryPipeline, args: argparse.Namespace) -> dict[str, Any]:
    payload = asdict(pipeline.summary())
    payload["timepoints"] = list(pipeline.timepoints)
    payload["drone_ids"] = list(pipeline.index.drone_ids)
    return payload


def _timeline(pipeline: TelemetryPipeline, args: argparse.Namespace) -> dict[str, Any]:
    layout = pipeline.timeline_layout()
    return {
        "points": [asdict(point) for point in pipeline.timeline()],
        "series": {
            str(swarm_id): {
                "label": swarm_label(swarm_id),
                "color": swarm_color(swarm_id),
                "points": [asdict(p) for p in points],
            }
            for swarm_id, points in layout.series().items()
        },
    }


def _frame(pipeline: TelemetryPipeline, args: argparse.Namespace) -> dict[str, Any]:
    frame = pipeline.frame_at(args.index)
    drones = []
    for record, point in pipeline.project_frame(frame.timepoint):
        drones.append(
            {
                "drone_id": record.drone_id,
                "swarm_id": record.swarm_id,
                "state": record.state,
                "z": round(record.position.z, 1),
                "color": swarm_color(record.swarm_id),
                "projected": asdict(point),
            }
        )
    return {
        "timepoint": frame.timepoint,
        "mode": pipeline.projector.mode.value,
        "bounds": asdict(pipeline.bounds_for(frame.timepoint)) if frame.records else None,
        "drones": drones,
    }


def _heatmap(pipeline: TelemetryPipeline, args: argparse.Namespace) -> dict[str, Any]:
    layout = pipeline.heatmap()
    return {
        "cell_width": layout.cell_width,
        "cell_height": layout.cell_height,
        "cells": [asdict(cell) for cell in layout.cells()],
        "legend": [{"state": state, "color": color} for state, color in layout.legend()],
    }


def _stats(pipeline: TelemetryPipeline, args: argparse.Namespace) -> dict[str, Any]:
    frame = pipeline.frame_at(args.index)
    stats = pipeline.comm_stats(frame.timepoint)
    return {"timepoint": frame.timepoint, **asdict(stats)}


def _columns(pipeline: TelemetryPipeline, args: argparse.Namespace) -> dict[str, Any]:
    return {
        "columns": [{"label": label, "description": COLUMN_DESCRIPTIONS[label]} for label in RAW_TELEMETRY_COLUMNS],
    }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect drone swarm telemetry derived views as JSON.")
    parser.add_argument("csv", help="Path to the telemetry CSV export.")
    parser.add_argument("--fixed-scale", action="store_true", help="Project against the declared world range.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level for stderr output.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("summary", help="Record, timepoint and drone counts.").set_defaults(handler=_summary)
    sub.add_parser("timeline", help="Per-swarm average battery over time.").set_defaults(handler=_timeline)
    sub.add_parser("heatmap", help="State heatmap cell geometry.").set_defaults(handler=_heatmap)
    sub.add_parser("columns", help="Expected CSV column labels and their meaning.").set_defaults(handler=_columns)

    frame = sub.add_parser("frame", help="Projected drone positions for one frame.")
    frame.add_argument("--index", type=int, default=0, help="Timepoint index in sorted order.")
    frame.set_defaults(handler=_frame)

    stats = sub.add_parser("stats", help="Signal and video statistics for one frame.")
    stats.add_argument("--index", type=int, default=0, help="Timepoint index in sorted order.")
    stats.set_defaults(handler=_stats)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    try:
        settings: Settings = load_settings()
        if args.fixed_scale:
            settings = replace(
                settings,
                projection=settings.projection.model_copy(update={"mode": ScalingMode.FIXED_SCALE}),
            )
        pipeline = TelemetryPipeline.from_path(Path(args.csv), settings)
    except (FileNotFoundError, ValueError) as exc:
        # Covers TelemetryFormatError and pydantic ValidationError, both ValueError subclasses.
        logger.error("Cannot load telemetry from %s: %s", args.csv, exc)
        raise SystemExit(2) from exc

    print(json.dumps(args.handler(pipeline, args), indent=2))


if __name__ == "__main__":
    main()
