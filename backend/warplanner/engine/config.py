"""Layout configuration: controls where and how spawned models are placed."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LayoutConfig:
    """Board layout knobs. Rules constants live in ``constants.py``."""

    # Edge gap between neighboring models in a fresh grid or a line-up
    spacing_mm: float = 5.0

    # Where a newly spawned group lands, relative to the board origin
    spawn_x_mm: float = 50.0
    spawn_y_mm: float = 50.0
