"""Exclusion / aura zones: buffers offset outward from each base edge.

Round bases give a concentric circle of radius r + d. Rectangular bases give
a rounded rectangle: straight extents (w + 2d, l + 2d), corner radius d,
rotated with the model. Zones are for rendering only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from shapely import affinity
from shapely.geometry import Point, Polygon, box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from warplanner.engine.board import Model, RectangularBase, SpawnedGroup, model_key
from warplanner.engine.constants import DEEP_STRIKE_DISTANCE_MM

logger = logging.getLogger(__name__)

# Segments per quarter circle for buffered arcs.
_QUAD_SEGS = 16


@dataclass(frozen=True)
class Zone:
    key: str
    kind: str  # "circle" | "rounded_rect"
    center: tuple[float, float]
    buffer_distance: float
    rotation: float
    polygon: Polygon
    radius: float | None = None
    width: float | None = None
    height: float | None = None
    corner_radius: float | None = None


def model_zone(model: Model, group: SpawnedGroup, distance: float) -> Zone:
    """Buffer of ``distance`` mm around one model's base."""
    d = max(0.0, distance)
    ax, ay = group.absolute_position(model)
    rotation = model.rotation or 0.0
    key = model_key(group.id, model.id)

    if isinstance(group.base, RectangularBase):
        w, l = group.base.width, group.base.length
        cx, cy = ax + w / 2, ay + l / 2
        footprint = box(cx - w / 2, cy - l / 2, cx + w / 2, cy + l / 2)
        poly = footprint.buffer(d, quad_segs=_QUAD_SEGS, join_style="round") if d > 0 else footprint
        # Board y axis points down, so a positive angle turns clockwise on screen.
        if rotation:
            poly = affinity.rotate(poly, rotation, origin=(cx, cy))
        return Zone(
            key=key,
            kind="rounded_rect",
            center=(cx, cy),
            buffer_distance=d,
            rotation=rotation,
            polygon=poly,
            width=w + 2 * d,
            height=l + 2 * d,
            corner_radius=d,
        )

    r = group.base.effective_diameter / 2
    cx, cy = ax + r, ay + r
    radius = r + d
    return Zone(
        key=key,
        kind="circle",
        center=(cx, cy),
        buffer_distance=d,
        rotation=rotation,
        polygon=Point(cx, cy).buffer(radius, quad_segs=_QUAD_SEGS),
        radius=radius,
    )


def group_zones(group: SpawnedGroup, distance: float) -> list[Zone]:
    return [model_zone(m, group, distance) for m in group.models]


def deep_strike_zones(groups: list[SpawnedGroup]) -> list[Zone]:
    """9" denial zones around every model on the board."""
    zones = [z for g in groups for z in group_zones(g, DEEP_STRIKE_DISTANCE_MM)]
    logger.debug("Deep strike: %d zones", len(zones))
    return zones


def aura_zones(
    groups: list[SpawnedGroup],
    distances_by_unit: dict[str, float],
    default_distance: float | None = None,
) -> list[Zone]:
    """Aura zones per unit name (mm). Units with no distance and no default are skipped.

    A group is looked up by its own name first, then by its parent unit's name.
    """
    zones: list[Zone] = []
    for g in groups:
        distance = distances_by_unit.get(g.name)
        if distance is None and g.parent_unit_name:
            distance = distances_by_unit.get(g.parent_unit_name)
        if distance is None:
            distance = default_distance
        if distance is None:
            continue
        zones.extend(group_zones(g, distance))
    return zones


def exclusion_union(zones: list[Zone]) -> BaseGeometry:
    """Merged region covered by any zone (empty geometry for no zones)."""
    return unary_union([z.polygon for z in zones])
