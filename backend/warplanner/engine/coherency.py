"""Unit coherency.

A unit is coherent when:
  * every model has enough other models within 2" edge to edge
    (1 neighbor for units of up to 6 models, 2 neighbors for 7+), and
  * the "within 2"" graph is one connected component.

A split unit fails as a whole: if the graph is disconnected, every model
is reported, including those that individually have enough neighbors.

Single-group results use bare model ids. Parent-unit results span all
groups and use composite ``groupId-modelId`` keys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from warplanner.engine.board import SpawnedGroup, group_by_parent_unit, model_key
from warplanner.engine.connectivity import connected_components, is_single_connected_component
from warplanner.engine.constants import (
    COHERENCY_DISTANCE_MM,
    DISTANCE_EPSILON_MM,
    required_neighbors,
)
from warplanner.engine.distance import edge_distance_matrix, placed_models

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoherencyResult:
    is_in_coherency: bool
    out_of_coherency_models: frozenset[str] = frozenset()
    # Connected clusters, in model order. A coherent unit has exactly one.
    components: tuple[tuple[str, ...], ...] = ()


_TRIVIAL = CoherencyResult(is_in_coherency=True)


def _evaluate(keys: list[str], gaps: np.ndarray) -> CoherencyResult:
    n = len(keys)
    if n <= 1:
        return CoherencyResult(
            is_in_coherency=True,
            components=(tuple(keys),) if keys else (),
        )

    required = required_neighbors(n)
    in_range = gaps <= COHERENCY_DISTANCE_MM + DISTANCE_EPSILON_MM
    np.fill_diagonal(in_range, False)

    adjacency: dict[str, list[str]] = {
        keys[i]: [keys[j] for j in np.flatnonzero(in_range[i])] for i in range(n)
    }
    neighbor_counts = in_range.sum(axis=1)

    violations = {keys[i] for i in range(n) if neighbor_counts[i] < required}

    if not is_single_connected_component(keys, adjacency):
        violations = set(keys)
    components = connected_components(keys, adjacency)

    return CoherencyResult(
        is_in_coherency=not violations,
        out_of_coherency_models=frozenset(violations),
        components=tuple(tuple(c) for c in components),
    )


def check_coherency(group: SpawnedGroup) -> CoherencyResult:
    """Coherency of a single group. Violations are bare model ids."""
    if not group.models:
        return _TRIVIAL
    placed = placed_models([group])
    keys = [m.id for m in group.models]
    result = _evaluate(keys, edge_distance_matrix(placed))
    logger.debug(
        "Coherency %s: %d models, %d violating",
        group.id,
        len(keys),
        len(result.out_of_coherency_models),
    )
    return result


def check_parent_unit_coherency(groups: list[SpawnedGroup]) -> CoherencyResult:
    """Coherency of one logical unit drawn as several groups.

    Neighbor counts, the 6/7 threshold and connectivity all span every model
    of every group. Violations are ``groupId-modelId`` keys.
    """
    placed = placed_models(groups)
    if not placed:
        return _TRIVIAL
    keys = [model_key(g.id, m.id) for g, m in placed]
    result = _evaluate(keys, edge_distance_matrix(placed))
    logger.debug(
        "Parent-unit coherency over %d groups: %d models, %d violating",
        len(groups),
        len(keys),
        len(result.out_of_coherency_models),
    )
    return result


@dataclass(frozen=True)
class UnitCoherency:
    """Result for one logical unit: a standalone group or a parent unit."""

    unit_id: str
    unit_name: str
    group_ids: tuple[str, ...]
    result: CoherencyResult


@dataclass(frozen=True)
class BoardCoherency:
    units: tuple[UnitCoherency, ...] = ()
    # group id -> bare model ids out of coherency, for per-group rendering
    by_group: dict[str, frozenset[str]] = field(default_factory=dict)

    @property
    def incoherent_unit_count(self) -> int:
        return sum(1 for u in self.units if not u.result.is_in_coherency)


def evaluate_board(groups: list[SpawnedGroup]) -> BoardCoherency:
    """Coherency for every logical unit on the board.

    Groups sharing a ``parent_unit_id`` are evaluated jointly; the rest alone.
    """
    linked, standalone = group_by_parent_unit(groups)
    units: list[UnitCoherency] = []
    by_group: dict[str, frozenset[str]] = {}

    for g in standalone:
        result = check_coherency(g)
        units.append(UnitCoherency(g.id, g.name, (g.id,), result))
        by_group[g.id] = result.out_of_coherency_models

    for parent_id, members in linked.items():
        result = check_parent_unit_coherency(members)
        name = members[0].parent_unit_name or members[0].name
        units.append(UnitCoherency(parent_id, name, tuple(g.id for g in members), result))
        for g in members:
            by_group[g.id] = frozenset(
                m.id for m in g.models if model_key(g.id, m.id) in result.out_of_coherency_models
            )

    board = BoardCoherency(units=tuple(units), by_group=by_group)
    if board.incoherent_unit_count:
        logger.debug("%d unit(s) not coherent", board.incoherent_unit_count)
    return board
