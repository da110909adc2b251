"""Length conversion boundary: mm, inches, screen pixels. No engine imports.

The engine works exclusively in millimeters. Inches appear only where a
human-readable distance is produced; pixels only where the UI hands us
screen coordinates.
"""

from __future__ import annotations

import math

MM_PER_INCH = 25.4

# Tournament board: 60" x 44".
BOARD_WIDTH_MM = 60 * MM_PER_INCH  # 1524.0
BOARD_HEIGHT_MM = 44 * MM_PER_INCH  # 1117.6

# Slack below the display ceiling, in display units. Absorbs division noise
# so that 50.8 mm reads 2.00" rather than 2.01".
_CEIL_SLACK = 1e-9


def mm_to_inches(mm: float) -> float:
    return mm / MM_PER_INCH


def inches_to_mm(inches: float) -> float:
    return inches * MM_PER_INCH


def ceil_inches(mm: float, decimals: int = 2) -> float:
    """Inches rounded UP to ``decimals`` places. Never under-reports a gap."""
    factor = 10**decimals
    return math.ceil(mm_to_inches(mm) * factor - _CEIL_SLACK) / factor


def format_inches(mm: float) -> str:
    """Display form of a measured distance, e.g. ``1.01"``."""
    return f'{ceil_inches(mm):.2f}"'


def fit_scale(container_width_px: float, container_height_px: float) -> float:
    """Pixels per mm so the whole board fits the container.

    The limiting axis depends on the container's aspect ratio versus 60:44.
    """
    if container_width_px <= 0 or container_height_px <= 0:
        return 1.0
    container_aspect = container_width_px / container_height_px
    board_aspect = BOARD_WIDTH_MM / BOARD_HEIGHT_MM
    if container_aspect > board_aspect:
        return container_height_px / BOARD_HEIGHT_MM
    return container_width_px / BOARD_WIDTH_MM


def mm_to_px(mm: float, scale: float) -> float:
    return mm * scale


def px_to_mm(px: float, scale: float) -> float:
    if scale <= 0:
        raise ValueError(f"Invalid scale: {scale} (must be > 0)")
    return px / scale
