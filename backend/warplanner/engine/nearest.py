"""Nearest neighbors of a model within its unit."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from warplanner.engine.board import Model, SpawnedGroup, model_key
from warplanner.engine.constants import required_neighbors
from warplanner.engine.distance import edge_distance
from warplanner.utils.units import ceil_inches

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NearestModel:
    model: Model
    group: SpawnedGroup
    distance_mm: float
    # Rounded UP to 2 decimals
    distance_inches: float

    @property
    def key(self) -> str:
        return model_key(self.group.id, self.model.id)


def find_nearest_models(
    target_model: Model,
    target_group: SpawnedGroup,
    search_groups: list[SpawnedGroup] | None = None,
) -> list[NearestModel]:
    """The 1 or 2 closest other models, ascending by edge distance.

    The count mirrors the coherency rule for the total number of models in
    scope: 0 for a lone model, 1 for up to 6, 2 for 7+. Scope defaults to the
    target's own group; pass every group of a parent unit to search across it.
    """
    scope = list(search_groups) if search_groups else [target_group]
    if all(g.id != target_group.id for g in scope):
        scope.insert(0, target_group)

    total = sum(len(g.models) for g in scope)
    k = required_neighbors(total)
    if k == 0:
        return []

    candidates: list[NearestModel] = []
    for g in scope:
        for m in g.models:
            if g.id == target_group.id and m.id == target_model.id:
                continue
            mm = edge_distance(target_model, target_group, m, g)
            candidates.append(NearestModel(m, g, mm, ceil_inches(mm)))

    # Stable sort keeps board order for ties.
    candidates.sort(key=lambda c: c.distance_mm)
    logger.debug(
        "Nearest to %s: %d candidates, returning %d",
        model_key(target_group.id, target_model.id),
        len(candidates),
        min(k, len(candidates)),
    )
    return candidates[:k]
