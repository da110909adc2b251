"""Shared test fixtures."""

from __future__ import annotations

import pytest

from warplanner.engine.board import (
    CircularBase,
    Model,
    RectangularBase,
    SpawnedGroup,
)


def circle_group(
    group_id: str,
    positions: list[tuple[float, float]],
    diameter: float = 32.0,
    x: float = 0.0,
    y: float = 0.0,
    parent_unit_id: str | None = None,
    name: str | None = None,
) -> SpawnedGroup:
    """Group of round-based models at the given top-left positions (mm)."""
    return SpawnedGroup(
        id=group_id,
        name=name or group_id,
        base=CircularBase(diameter),
        models=tuple(Model(f"model-{i}", px, py) for i, (px, py) in enumerate(positions)),
        x=x,
        y=y,
        parent_unit_id=parent_unit_id,
    )


def rect_group(
    group_id: str,
    positions: list[tuple[float, float]],
    width: float = 60.0,
    length: float = 35.0,
    x: float = 0.0,
    y: float = 0.0,
) -> SpawnedGroup:
    return SpawnedGroup(
        id=group_id,
        name=group_id,
        base=RectangularBase(width, length),
        models=tuple(Model(f"model-{i}", px, py) for i, (px, py) in enumerate(positions)),
        x=x,
        y=y,
    )


def row(count: int, pitch: float) -> list[tuple[float, float]]:
    return [(i * pitch, 0.0) for i in range(count)]


# Two 32 mm bases, centers 82.8 mm apart: edge gap is exactly 2".
BOUNDARY_PAIR = [(0.0, 0.0), (82.8, 0.0)]

# Two clusters of three, each tight, 300 mm apart.
SPLIT_CLUSTERS = [(0.0, 0.0), (40.0, 0.0), (80.0, 0.0), (380.0, 0.0), (420.0, 0.0), (460.0, 0.0)]


@pytest.fixture
def squad() -> SpawnedGroup:
    """Five 32 mm models in a row, 8 mm apart."""
    return circle_group("squad", row(5, 40.0))


@pytest.fixture
def horde() -> SpawnedGroup:
    """Seven 32 mm models in a row; only adjacent models are within 2"."""
    return circle_group("horde", row(7, 60.0))


@pytest.fixture
def parent_unit() -> list[SpawnedGroup]:
    """A: one 32 mm model. B: two 25 mm models. All within 40 mm of each other."""
    a = circle_group("A", [(0.0, 0.0)], diameter=32.0, parent_unit_id="P")
    b = circle_group("B", [(0.0, 0.0), (0.0, 30.0)], diameter=25.0, x=50.0, parent_unit_id="P")
    return [a, b]
