"""Warplanner spatial engine: coherency, distance, overlap and zone geometry."""

from warplanner.engine.board import (
    CircularBase,
    Model,
    RectangularBase,
    SelectedModel,
    SpawnableUnit,
    SpawnedGroup,
    base_from_dimensions,
    model_key,
)
from warplanner.engine.coherency import (
    CoherencyResult,
    check_coherency,
    check_parent_unit_coherency,
    evaluate_board,
)
from warplanner.engine.connectivity import is_single_connected_component
from warplanner.engine.distance import edge_distance
from warplanner.engine.nearest import NearestModel, find_nearest_models
from warplanner.engine.overlap import find_overlaps

__all__ = [
    "CircularBase",
    "RectangularBase",
    "Model",
    "SpawnedGroup",
    "SpawnableUnit",
    "SelectedModel",
    "base_from_dimensions",
    "model_key",
    "CoherencyResult",
    "check_coherency",
    "check_parent_unit_coherency",
    "evaluate_board",
    "is_single_connected_component",
    "edge_distance",
    "NearestModel",
    "find_nearest_models",
    "find_overlaps",
]
