"""Board data model: positioned models, their groups, and base shapes.

All values are immutable snapshots. Operations that "change" the board
build new values with ``dataclasses.replace``; the store owns the current
snapshot per round.

Coordinates:
    Model (x, y) is relative to its group's origin.
    Group (x, y) is relative to the board origin.
    A model's (x, y) is the top-left of its base footprint, as drawn.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from warplanner.engine.constants import DEFAULT_BASE_DIAMETER_MM


@dataclass(frozen=True)
class CircularBase:
    diameter: float

    def __post_init__(self) -> None:
        if not self.diameter > 0:
            raise ValueError(f"Invalid diameter: {self.diameter} (must be > 0)")

    @property
    def effective_diameter(self) -> float:
        return self.diameter

    @property
    def footprint(self) -> tuple[float, float]:
        return (self.diameter, self.diameter)


@dataclass(frozen=True)
class RectangularBase:
    """Oval/rectangular base. Distance checks treat it as its circumscribing
    circle of diameter max(width, length)."""

    width: float
    length: float

    def __post_init__(self) -> None:
        if not (self.width > 0 and self.length > 0):
            raise ValueError(
                f"Invalid rectangular base: {self.width}x{self.length} (must be > 0)"
            )

    @property
    def effective_diameter(self) -> float:
        return max(self.width, self.length)

    @property
    def footprint(self) -> tuple[float, float]:
        return (self.width, self.length)


BaseShape = Union[CircularBase, RectangularBase]


def _positive(value: float | None) -> float | None:
    if value is None or not math.isfinite(value) or value <= 0:
        return None
    return float(value)


def base_from_dimensions(
    is_rectangular: bool = False,
    base_size: float | None = None,
    width: float | None = None,
    length: float | None = None,
) -> BaseShape:
    """Build a base from the flat wire form. Missing sizes fall back to 25 mm."""
    if is_rectangular:
        return RectangularBase(
            width=_positive(width) or DEFAULT_BASE_DIAMETER_MM,
            length=_positive(length) or DEFAULT_BASE_DIAMETER_MM,
        )
    return CircularBase(diameter=_positive(base_size) or DEFAULT_BASE_DIAMETER_MM)


def default_base() -> BaseShape:
    return CircularBase(diameter=DEFAULT_BASE_DIAMETER_MM)


def normalize_rotation(degrees: float | None) -> float | None:
    if degrees is None:
        return None
    r = float(degrees) % 360.0
    # Tiny negatives round up to the divisor.
    return 0.0 if r >= 360.0 else r


@dataclass(frozen=True)
class Model:
    """One miniature. Position in mm relative to its group origin."""

    id: str
    x: float
    y: float
    rotation: float | None = None

    def __post_init__(self) -> None:
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Model {self.id}: non-finite position ({self.x}, {self.y})")
        if self.rotation is not None:
            if not math.isfinite(self.rotation):
                raise ValueError(f"Model {self.id}: non-finite rotation {self.rotation}")
            object.__setattr__(self, "rotation", normalize_rotation(self.rotation))


@dataclass(frozen=True)
class SpawnedGroup:
    """One deployed unit, or one visual sub-group of a parent unit."""

    id: str
    name: str
    base: BaseShape = field(default_factory=default_base)
    models: tuple[Model, ...] = ()
    x: float = 0.0
    y: float = 0.0
    parent_unit_id: str | None = None
    parent_unit_name: str | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of models; store a tuple.
        if not isinstance(self.models, tuple):
            object.__setattr__(self, "models", tuple(self.models))

    @property
    def is_rectangular(self) -> bool:
        return isinstance(self.base, RectangularBase)

    @property
    def half_size(self) -> float:
        return self.base.effective_diameter / 2

    def get_model(self, model_id: str) -> Model | None:
        for m in self.models:
            if m.id == model_id:
                return m
        return None

    def absolute_position(self, model: Model) -> tuple[float, float]:
        """Top-left of the model's base on the board."""
        return (self.x + model.x, self.y + model.y)

    def center(self, model: Model) -> tuple[float, float]:
        """Center used for distance checks: top-left plus the effective half size."""
        ax, ay = self.absolute_position(model)
        half = self.half_size
        return (ax + half, ay + half)


@dataclass(frozen=True)
class SpawnableUnit:
    """A unit from the army list, ready to be placed on the board."""

    unit_id: str
    unit_name: str
    model_count: int
    base: BaseShape = field(default_factory=default_base)
    parent_unit_id: str | None = None
    parent_unit_name: str | None = None


@dataclass(frozen=True)
class SelectedModel:
    group_id: str
    model_id: str


def model_key(group_id: str, model_id: str) -> str:
    """Composite identifier used wherever models from several groups mix."""
    return f"{group_id}-{model_id}"


def group_by_parent_unit(
    groups: list[SpawnedGroup],
) -> tuple[dict[str, list[SpawnedGroup]], list[SpawnedGroup]]:
    """Split groups into parent-unit buckets and standalone groups.

    Order within each bucket follows the input order.
    """
    linked: dict[str, list[SpawnedGroup]] = {}
    standalone: list[SpawnedGroup] = []
    for g in groups:
        if g.parent_unit_id:
            linked.setdefault(g.parent_unit_id, []).append(g)
        else:
            standalone.append(g)
    return linked, standalone


def find_group(groups: list[SpawnedGroup], group_id: str) -> SpawnedGroup | None:
    for g in groups:
        if g.id == group_id:
            return g
    return None
