"""Edge-to-edge distance between based models.

Every base is treated as a circle of its effective diameter: the base
diameter for round bases, max(width, length) for rectangular ones.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from scipy.spatial.distance import cdist

from warplanner.engine.board import Model, SpawnedGroup, model_key


def edge_distance(
    model_a: Model,
    group_a: SpawnedGroup,
    model_b: Model,
    group_b: SpawnedGroup,
) -> float:
    """Gap between two base edges along the line joining their centers (mm).

    Overlapping or touching bases report 0, never a negative gap.
    """
    ax, ay = group_a.center(model_a)
    bx, by = group_b.center(model_b)
    center_distance = math.hypot(bx - ax, by - ay)
    # Sum radii first so the result is symmetric in (a, b).
    return max(0.0, center_distance - (group_a.half_size + group_b.half_size))


def placed_models(groups: list[SpawnedGroup]) -> list[tuple[SpawnedGroup, Model]]:
    """Flatten groups into (group, model) pairs in board order."""
    return [(g, m) for g in groups for m in g.models]


def centers_and_radii(
    placed: list[tuple[SpawnedGroup, Model]],
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    if not placed:
        return np.empty((0, 2)), np.empty(0)
    centers = np.array([g.center(m) for g, m in placed], dtype=np.float64)
    radii = np.array([g.half_size for g, _ in placed], dtype=np.float64)
    return centers, radii


def center_distance_matrix(centers: NDArray[np.float64]) -> NDArray[np.float64]:
    if len(centers) == 0:
        return np.empty((0, 0))
    return cdist(centers, centers)


def edge_distance_matrix(placed: list[tuple[SpawnedGroup, Model]]) -> NDArray[np.float64]:
    """Pairwise edge gaps. Diagonal is 0; matrix is symmetric."""
    centers, radii = centers_and_radii(placed)
    dmat = center_distance_matrix(centers)
    if dmat.size == 0:
        return dmat
    gaps = dmat - (radii[:, None] + radii[None, :])
    gaps = np.maximum(gaps, 0.0)
    np.fill_diagonal(gaps, 0.0)
    return gaps


def placed_keys(placed: list[tuple[SpawnedGroup, Model]]) -> list[str]:
    return [model_key(g.id, m.id) for g, m in placed]
