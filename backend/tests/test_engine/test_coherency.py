"""Tests for unit coherency: single groups, parent units, whole boards."""

from warplanner.engine.coherency import (
    check_coherency,
    check_parent_unit_coherency,
    evaluate_board,
)
from warplanner.engine.board import SpawnedGroup
from tests.conftest import BOUNDARY_PAIR, SPLIT_CLUSTERS, circle_group, row


def test_single_model_is_coherent():
    result = check_coherency(circle_group("g", [(0.0, 0.0)]))
    assert result.is_in_coherency
    assert result.out_of_coherency_models == frozenset()


def test_empty_group_is_coherent():
    result = check_coherency(SpawnedGroup(id="g", name="g"))
    assert result.is_in_coherency
    assert not result.out_of_coherency_models


def test_small_unit_in_range_is_coherent(squad):
    result = check_coherency(squad)
    assert result.is_in_coherency
    assert len(result.components) == 1


def test_exact_two_inch_gap_is_coherent():
    result = check_coherency(circle_group("g", BOUNDARY_PAIR))
    assert result.is_in_coherency


def test_gap_over_two_inches_flags_both():
    result = check_coherency(circle_group("g", [(0.0, 0.0), (83.0, 0.0)]))
    assert not result.is_in_coherency
    assert result.out_of_coherency_models == {"model-0", "model-1"}


def test_large_unit_needs_two_neighbors(horde):
    result = check_coherency(horde)
    assert not result.is_in_coherency
    # Ends have one neighbor each; everyone else has two.
    assert result.out_of_coherency_models == {"model-0", "model-6"}


def test_large_unit_tight_block_is_coherent():
    # 8 models on a 2x4 block, 8 mm apart: everyone has at least two neighbors
    positions = [(c * 40.0, r * 40.0) for r in range(2) for c in range(4)]
    assert check_coherency(circle_group("g", positions)).is_in_coherency


def test_split_unit_flags_every_model():
    result = check_coherency(circle_group("g", SPLIT_CLUSTERS))
    assert not result.is_in_coherency
    assert len(result.out_of_coherency_models) == 6
    assert len(result.components) == 2


def test_does_not_mutate_input(squad):
    before = squad
    check_coherency(squad)
    assert squad == before
    assert squad.models == before.models


def test_parent_unit_coherent(parent_unit):
    result = check_parent_unit_coherency(parent_unit)
    assert result.is_in_coherency
    assert result.components == (("A-model-0", "B-model-0", "B-model-1"),)


def test_parent_unit_uses_composite_ids(parent_unit):
    a, b = parent_unit
    far_b = circle_group("B", [(0.0, 0.0), (0.0, 30.0)], diameter=25.0, x=400.0, parent_unit_id="P")
    result = check_parent_unit_coherency([a, far_b])
    assert not result.is_in_coherency
    assert result.out_of_coherency_models == {"A-model-0", "B-model-0", "B-model-1"}


def test_parent_unit_threshold_uses_total_count():
    # 4 + 3 models in one chain, only neighbors 28 mm apart in range
    a = circle_group("A", row(4, 60.0), parent_unit_id="P")
    b = circle_group("B", row(3, 60.0), x=240.0, parent_unit_id="P")
    assert check_coherency(a).is_in_coherency
    result = check_parent_unit_coherency([a, b])
    assert result.out_of_coherency_models == {"A-model-0", "B-model-2"}


def test_parent_unit_empty_input_is_coherent():
    assert check_parent_unit_coherency([]).is_in_coherency
    assert check_parent_unit_coherency([SpawnedGroup(id="g", name="g")]).is_in_coherency


def test_evaluate_board_mixes_standalone_and_parent_units(parent_unit, horde, squad):
    board = evaluate_board([squad, *parent_unit, horde])
    assert [u.unit_id for u in board.units] == ["squad", "horde", "P"]
    assert board.incoherent_unit_count == 1
    assert board.by_group["horde"] == {"model-0", "model-6"}
    assert board.by_group["A"] == frozenset()
    assert board.by_group["B"] == frozenset()


def test_evaluate_board_maps_parent_violations_to_bare_ids(parent_unit):
    a, _ = parent_unit
    far_b = circle_group("B", [(0.0, 0.0)], diameter=25.0, x=400.0, parent_unit_id="P")
    board = evaluate_board([a, far_b])
    assert board.by_group == {"A": {"model-0"}, "B": {"model-0"}}
