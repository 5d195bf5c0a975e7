from __future__ import annotations

import pytest

from swarm_telemetry.models import AggregatePoint
from swarm_telemetry.timeline import TimelineLayout

# Default surface: 800x400, margins top 40, right 40, bottom 60, left 60 -> interior 700x300.


def test_single_timepoint_is_centred() -> None:
    layout = TimelineLayout([AggregatePoint("T1", 1, 80.0)])

    [point] = layout.series()[1]

    assert point.x == pytest.approx(410.0)


def test_timepoints_spread_across_interior() -> None:
    points = [AggregatePoint(tp, 1, 70.0) for tp in ("T1", "T2", "T3")]

    xs = [p.x for p in TimelineLayout(points).series()[1]]

    assert xs == pytest.approx([60.0, 410.0, 760.0])


def test_battery_axis_runs_from_lowest_average_to_full() -> None:
    layout = TimelineLayout([AggregatePoint("T1", 1, 55.0), AggregatePoint("T2", 1, 100.0)])

    assert layout.battery_min == 50.0
    assert layout.scale_y(100.0) == pytest.approx(40.0)
    assert layout.scale_y(50.0) == pytest.approx(340.0)
    assert layout.scale_y(55.0) == pytest.approx(310.0)


def test_series_group_per_swarm_in_time_order() -> None:
    points = [
        AggregatePoint("T2", 2, 60.0),
        AggregatePoint("T1", -1, 40.0),
        AggregatePoint("T1", 2, 65.0),
    ]

    series = TimelineLayout(points).series()

    assert list(series) == [-1, 2]
    assert [p.timepoint for p in series[2]] == ["T1", "T2"]


def test_y_ticks_cover_axis() -> None:
    ticks = TimelineLayout([AggregatePoint("T1", 1, 55.0)]).y_ticks()

    assert ticks[0] == pytest.approx((40.0, 100.0))
    assert ticks[-1] == pytest.approx((340.0, 50.0))
    assert len(ticks) == 6


def test_empty_timeline_has_no_series() -> None:
    assert TimelineLayout([]).series() == {}
