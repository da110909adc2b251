"""Rules constants for the spatial engine.

All lengths are millimeters. These are game rules, not configuration:
nothing here is read from settings.
"""

from warplanner.utils.units import MM_PER_INCH

# Coherency: every model within 2" of its neighbors, edge to edge.
COHERENCY_DISTANCE_MM = 2 * MM_PER_INCH  # = 50.8

# Units larger than this need two neighbors in range instead of one.
SMALL_UNIT_MAX_MODELS = 6
SMALL_UNIT_REQUIRED_NEIGHBORS = 1
LARGE_UNIT_REQUIRED_NEIGHBORS = 2

# Most common infantry base. Used whenever a group carries no base size.
DEFAULT_BASE_DIAMETER_MM = 25.0

# Overlap tolerance absorbs packing noise from the spawn grid.
OVERLAP_TOLERANCE_MM = 0.5

# Float noise on distance comparisons (82.8 - 32 may land a ulp above 50.8).
DISTANCE_EPSILON_MM = 1e-6

DEEP_STRIKE_DISTANCE_MM = 9 * MM_PER_INCH

# Largest unit the planner will spawn in one go.
MAX_UNIT_MODELS = 200


def required_neighbors(model_count: int) -> int:
    """Neighbors each model needs for a unit of ``model_count`` models."""
    if model_count <= 1:
        return 0
    if model_count <= SMALL_UNIT_MAX_MODELS:
        return SMALL_UNIT_REQUIRED_NEIGHBORS
    return LARGE_UNIT_REQUIRED_NEIGHBORS
