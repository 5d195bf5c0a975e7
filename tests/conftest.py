"""Shared fixtures for building telemetry CSV text in tests."""

from __future__ import annotations

from typing import Callable

import pytest

from swarm_telemetry.data.contract import RAW_TELEMETRY_COLUMNS

HEADER = ",".join(RAW_TELEMETRY_COLUMNS)

_ROW_DEFAULTS = {
    "drone": "1",
    "tp": "T1",
    "swarm": "1",
    "task": "7",
    "state": "Hovering",
    "px": "0",
    "py": "0",
    "pz": "0",
    "vx": "0",
    "vy": "0",
    "vz": "0",
    "pitch": "0",
    "roll": "0",
    "yaw": "0",
    "battery": "100",
    "range": "10",
    "signal": "",
    "video": "",
}


def make_row(**overrides: object) -> str:
    unknown = set(overrides) - set(_ROW_DEFAULTS)
    if unknown:
        raise KeyError(f"Unknown row fields: {sorted(unknown)}")
    values = {**_ROW_DEFAULTS, **{k: str(v) for k, v in overrides.items()}}
    return ",".join(values[key] for key in _ROW_DEFAULTS)


@pytest.fixture
def row() -> Callable[..., str]:
    return make_row


@pytest.fixture
def csv_text() -> Callable[..., str]:
    def _build(*rows: str, header: str = HEADER) -> str:
        return "\n".join([header, *rows]) + "\n"

    return _build


@pytest.fixture
def sample_csv(csv_text: Callable[..., str]) -> str:
    """Three drones over three timepoints in two swarms plus one unassigned drone."""
    return csv_text(
        make_row(drone=1, tp="T1", swarm=1, px=10, py=10, pz=5, battery=90, signal=5, video="Yes"),
        make_row(drone=2, tp="T1", swarm=1, px=30, py=20, pz=10, battery=70, signal=4, video="No"),
        make_row(drone=3, tp="T1", swarm=-1, px=20, py=40, pz=0, battery=50, state="Taking Off"),
        make_row(drone=1, tp="T2", swarm=1, px=12, py=11, pz=6, battery=85, signal=5, video="yes"),
        make_row(drone=2, tp="T2", swarm=2, px=31, py=22, pz=12, battery=65, signal=3),
        make_row(drone=1, tp="T3", swarm=1, px=14, py=12, pz=7, battery=80, state="Attacking"),
    )
