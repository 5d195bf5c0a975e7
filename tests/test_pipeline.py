from __future__ import annotations

from pathlib import Path

import pytest

from swarm_telemetry.config import ProjectionSettings, ScalingMode, Settings
from swarm_telemetry.pipeline import TelemetryPipeline


def test_pipeline_exposes_collaborator_views(sample_csv) -> None:
    pipeline = TelemetryPipeline.from_text(sample_csv)

    assert len(pipeline.records) == 6
    assert pipeline.timepoints == ("T1", "T2", "T3")
    assert [r.drone_id for r in pipeline.records_at("T1")] == [1, 2, 3]
    assert pipeline.frame_at(2).timepoint == "T3"
    assert pipeline.timeline()[0].swarm_id == -1


def test_project_defaults_to_the_records_own_frame(sample_csv) -> None:
    pipeline = TelemetryPipeline.from_text(sample_csv)
    t1 = pipeline.records_at("T1")

    xs = [pipeline.project(record).x for record in t1]

    # T1 spans x 10..30: drone 1 on the left margin, drone 2 on the right.
    assert xs == pytest.approx([50.0, 850.0, 450.0])
    assert [p.x for _, p in pipeline.project_frame("T1")] == pytest.approx(xs)


def test_fixed_scale_configuration(sample_csv) -> None:
    settings = Settings(projection=ProjectionSettings(mode=ScalingMode.FIXED_SCALE))
    pipeline = TelemetryPipeline.from_text(sample_csv, settings)

    record = pipeline.records_at("T1")[0]

    assert pipeline.project(record).x == pytest.approx(50.0 + 0.10 * 800)


def test_grid_cell_and_stats(sample_csv) -> None:
    pipeline = TelemetryPipeline.from_text(sample_csv)

    assert pipeline.grid_cell(3, "T1").state == "Taking Off"
    assert pipeline.grid_cell(3, "T2") is None

    stats = pipeline.comm_stats("T1")
    assert stats.signal_counts == {5: 1, 4: 1}
    assert (stats.video_on, stats.video_off) == (1, 1)


def test_pipeline_is_deterministic(sample_csv) -> None:
    first = TelemetryPipeline.from_text(sample_csv)
    second = TelemetryPipeline.from_text(sample_csv)

    assert first.records == second.records
    assert first.timepoints == second.timepoints
    assert first.timeline() == second.timeline()
    assert first.project_frame("T2") == second.project_frame("T2")
    assert list(first.heatmap().cells()) == list(second.heatmap().cells())


def test_timeline_result_is_a_copy(sample_csv) -> None:
    pipeline = TelemetryPipeline.from_text(sample_csv)

    pipeline.timeline().clear()

    assert len(pipeline.timeline()) == 5


def test_empty_dataset_degrades_to_empty_views(csv_text) -> None:
    pipeline = TelemetryPipeline.from_text(csv_text())

    assert pipeline.records == ()
    assert pipeline.timepoints == ()
    assert pipeline.timeline() == []
    assert pipeline.frame_at(0).records == ()
    assert pipeline.project_frame("") == []
    assert list(pipeline.heatmap().cells()) == []
    assert pipeline.comm_stats("").avg_signal is None
    assert pipeline.summary().record_count == 0
    assert pipeline.timeline_layout().series() == {}


def test_from_path(tmp_path: Path, sample_csv) -> None:
    path = tmp_path / "Sample Data.csv"
    path.write_text(sample_csv, encoding="utf-8")

    assert TelemetryPipeline.from_path(path).summary().drone_count == 3


def test_from_path_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        TelemetryPipeline.from_path(tmp_path / "absent.csv")


def test_overflowing_position_keeps_frame_projection_finite(csv_text, row) -> None:
    pipeline = TelemetryPipeline.from_text(csv_text(row(drone=1, px="1e400"), row(drone=2, px=5)))

    xs = [point.x for _, point in pipeline.project_frame("T1")]

    assert xs == pytest.approx([50.0, 850.0])
