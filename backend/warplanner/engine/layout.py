"""Placement operations: spawn, line up, move, rotate.

Each function returns new values; inputs are never modified.
"""

from __future__ import annotations

import math
from dataclasses import replace

from warplanner.engine.board import (
    Model,
    SelectedModel,
    SpawnableUnit,
    SpawnedGroup,
    normalize_rotation,
)
from warplanner.engine.config import LayoutConfig


def _pitch(diameter: float, spacing_mm: float) -> float:
    return diameter + spacing_mm


def spawn_group(unit: SpawnableUnit, config: LayoutConfig | None = None) -> SpawnedGroup:
    """Place a unit on the board in a square-ish grid, ceil(sqrt(n)) models per row."""
    cfg = config or LayoutConfig()
    count = max(0, unit.model_count)
    per_row = max(1, math.ceil(math.sqrt(count)))
    pitch = _pitch(unit.base.effective_diameter, cfg.spacing_mm)

    models = tuple(
        Model(id=f"model-{i}", x=(i % per_row) * pitch, y=(i // per_row) * pitch)
        for i in range(count)
    )
    return SpawnedGroup(
        id=unit.unit_id,
        name=unit.unit_name,
        base=unit.base,
        models=models,
        x=cfg.spawn_x_mm,
        y=cfg.spawn_y_mm,
        parent_unit_id=unit.parent_unit_id,
        parent_unit_name=unit.parent_unit_name,
    )


def line_up(group: SpawnedGroup, spacing_mm: float | None = None) -> SpawnedGroup:
    """Rearrange the group's models into one horizontal row.

    The row starts at the first model's position; order, ids and rotations are kept.
    """
    if not group.models:
        return group
    gap = LayoutConfig().spacing_mm if spacing_mm is None else spacing_mm
    pitch = _pitch(group.base.effective_diameter, gap)
    first = group.models[0]
    models = tuple(
        replace(m, x=first.x + i * pitch, y=first.y) for i, m in enumerate(group.models)
    )
    return replace(group, models=models)


def move_group(group: SpawnedGroup, x: float, y: float) -> SpawnedGroup:
    return replace(group, x=x, y=y)


def _update_model(group: SpawnedGroup, model_id: str, **changes) -> SpawnedGroup:
    models = tuple(replace(m, **changes) if m.id == model_id else m for m in group.models)
    return replace(group, models=models)


def move_model(group: SpawnedGroup, model_id: str, x: float, y: float) -> SpawnedGroup:
    """Set one model's position (relative to the group origin)."""
    return _update_model(group, model_id, x=x, y=y)


def rotate_model(group: SpawnedGroup, model_id: str, degrees: float) -> SpawnedGroup:
    """Set one model's rotation, normalized to [0, 360)."""
    return _update_model(group, model_id, rotation=normalize_rotation(degrees))


def translate_models(
    groups: list[SpawnedGroup],
    selection: list[SelectedModel],
    dx: float,
    dy: float,
) -> list[SpawnedGroup]:
    """Shift every selected model by (dx, dy) mm, across any number of groups."""
    selected = {(s.group_id, s.model_id) for s in selection}
    if not selected:
        return list(groups)
    touched = {gid for gid, _ in selected}
    result: list[SpawnedGroup] = []
    for g in groups:
        if g.id not in touched:
            result.append(g)
            continue
        models = tuple(
            replace(m, x=m.x + dx, y=m.y + dy) if (g.id, m.id) in selected else m
            for m in g.models
        )
        result.append(replace(g, models=models))
    return result
