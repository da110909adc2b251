"""Base overlap detection: circle-circle approximation, all pairs, all groups."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from warplanner.engine.board import SpawnedGroup
from warplanner.engine.constants import OVERLAP_TOLERANCE_MM
from warplanner.engine.distance import (
    center_distance_matrix,
    centers_and_radii,
    placed_keys,
    placed_models,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverlapResult:
    overlapping: frozenset[str] = frozenset()
    # (key_a, key_b) with a before b in board order
    pairs: tuple[tuple[str, str], ...] = ()


def find_overlaps(
    groups: list[SpawnedGroup],
    tolerance: float = OVERLAP_TOLERANCE_MM,
) -> OverlapResult:
    """Flag models whose bases intersect by more than ``tolerance`` mm.

    Bases exactly touching (center distance == rA + rB) are not overlapping.
    Keys are composite ``groupId-modelId``.
    """
    placed = placed_models(groups)
    if len(placed) < 2:
        return OverlapResult()

    keys = placed_keys(placed)
    centers, radii = centers_and_radii(placed)
    dmat = center_distance_matrix(centers)
    limit = radii[:, None] + radii[None, :] - tolerance

    hits = np.triu(dmat < limit, k=1)
    pairs = [(keys[i], keys[j]) for i, j in zip(*np.nonzero(hits))]
    overlapping = frozenset(k for pair in pairs for k in pair)

    if pairs:
        logger.debug("Overlap: %d pairs across %d models", len(pairs), len(placed))
    return OverlapResult(overlapping=overlapping, pairs=tuple(pairs))
