"""Tests for deep strike and aura zone geometry."""

import math

import pytest

from warplanner.engine.board import Model, SpawnedGroup, CircularBase
from warplanner.engine.zones import (
    aura_zones,
    deep_strike_zones,
    exclusion_union,
    group_zones,
    model_zone,
)
from tests.conftest import circle_group, rect_group


def test_circle_zone_radius():
    g = circle_group("g", [(0.0, 0.0)])
    zone = model_zone(g.models[0], g, 10.0)
    assert zone.kind == "circle"
    assert zone.center == (16.0, 16.0)
    assert zone.radius == 26.0
    assert zone.polygon.area == pytest.approx(math.pi * 26.0**2, rel=0.01)


def test_negative_distance_clamps_to_base():
    g = circle_group("g", [(0.0, 0.0)])
    zone = model_zone(g.models[0], g, -5.0)
    assert zone.buffer_distance == 0.0
    assert zone.radius == 16.0


def test_rect_zone_extents():
    g = rect_group("tank", [(0.0, 0.0)])
    zone = model_zone(g.models[0], g, 10.0)
    assert zone.kind == "rounded_rect"
    assert zone.width == 80.0
    assert zone.height == 55.0
    assert zone.corner_radius == 10.0
    assert zone.polygon.bounds == pytest.approx((-10.0, -10.0, 70.0, 45.0))


def test_rect_zone_has_rounded_corners():
    g = rect_group("tank", [(0.0, 0.0)])
    zone = model_zone(g.models[0], g, 10.0)
    # Full rectangle minus the four corner squares plus four quarter circles
    expected = 80 * 55 - 4 * 100 + math.pi * 100
    assert zone.polygon.area == pytest.approx(expected, rel=0.01)


def test_rect_zone_rotates_about_its_center():
    g = SpawnedGroup(
        id="tank",
        name="tank",
        base=rect_group("t", []).base,
        models=(Model("model-0", 0.0, 0.0, rotation=90.0),),
    )
    zone = model_zone(g.models[0], g, 10.0)
    assert zone.rotation == 90.0
    assert zone.center == (30.0, 17.5)
    assert zone.polygon.bounds == pytest.approx((2.5, -22.5, 57.5, 57.5), abs=1e-6)


def test_deep_strike_is_nine_inches():
    g = circle_group("g", [(0.0, 0.0), (100.0, 0.0)])
    zones = deep_strike_zones([g])
    assert [z.key for z in zones] == ["g-model-0", "g-model-1"]
    assert zones[0].buffer_distance == pytest.approx(228.6)
    assert zones[0].radius == pytest.approx(244.6)


def test_aura_lookup_order():
    boyz = circle_group("a", [(0.0, 0.0)], name="Boyz")
    nob = SpawnedGroup(
        id="b",
        name="Nob",
        base=CircularBase(40.0),
        models=(Model("model-0", 0.0, 0.0),),
        parent_unit_id="P",
        parent_unit_name="Warband",
    )
    grots = circle_group("c", [(0.0, 0.0)], name="Grots")

    zones = aura_zones([boyz, nob, grots], {"Boyz": 50.8, "Warband": 25.4})
    assert [z.key for z in zones] == ["a-model-0", "b-model-0"]
    assert zones[0].buffer_distance == 50.8
    assert zones[1].buffer_distance == 25.4

    with_default = aura_zones([boyz, nob, grots], {"Boyz": 50.8}, default_distance=10.0)
    assert [z.buffer_distance for z in with_default] == [50.8, 10.0, 10.0]


def test_union_merges_overlapping_zones():
    g = circle_group("g", [(0.0, 0.0), (40.0, 0.0)])
    zones = group_zones(g, 25.4)
    union = exclusion_union(zones)
    assert union.area < sum(z.polygon.area for z in zones)
    assert union.geom_type == "Polygon"


def test_union_of_nothing_is_empty():
    assert exclusion_union([]).is_empty
