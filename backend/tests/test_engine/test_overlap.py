"""Tests for base overlap detection."""

from warplanner.engine.board import SpawnableUnit, CircularBase
from warplanner.engine.layout import spawn_group
from warplanner.engine.overlap import find_overlaps
from tests.conftest import circle_group


def test_overlapping_pair_flags_both():
    g = circle_group("g", [(0.0, 0.0), (20.0, 0.0)])
    result = find_overlaps([g])
    assert result.overlapping == {"g-model-0", "g-model-1"}
    assert result.pairs == (("g-model-0", "g-model-1"),)


def test_touching_bases_do_not_overlap():
    g = circle_group("g", [(0.0, 0.0), (32.0, 0.0)])
    assert not find_overlaps([g]).overlapping


def test_overlap_within_tolerance_is_ignored():
    # 0.3 mm of intersection is packing noise
    g = circle_group("g", [(0.0, 0.0), (31.7, 0.0)])
    assert not find_overlaps([g]).overlapping


def test_overlap_beyond_tolerance_is_flagged():
    g = circle_group("g", [(0.0, 0.0), (31.4, 0.0)])
    assert find_overlaps([g]).overlapping == {"g-model-0", "g-model-1"}


def test_overlap_across_unrelated_units():
    a = circle_group("a", [(0.0, 0.0)])
    b = circle_group("b", [(0.0, 0.0), (200.0, 0.0)], diameter=25.0, x=10.0)
    result = find_overlaps([a, b])
    assert result.overlapping == {"a-model-0", "b-model-0"}


def test_no_models_no_overlap():
    assert find_overlaps([]).overlapping == frozenset()


def test_spawn_grid_does_not_overlap():
    unit = SpawnableUnit("u", "Boyz", 20, base=CircularBase(32.0))
    assert not find_overlaps([spawn_group(unit)]).overlapping
