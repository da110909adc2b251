"""Selection operations over (group id, model id) references."""

from __future__ import annotations

from dataclasses import replace

from warplanner.engine.board import SelectedModel, SpawnedGroup


def delete_selected(
    groups: list[SpawnedGroup],
    selection: list[SelectedModel],
) -> list[SpawnedGroup]:
    """Remove selected models. Groups left without models are pruned."""
    selected = {(s.group_id, s.model_id) for s in selection}
    result: list[SpawnedGroup] = []
    for g in groups:
        models = tuple(m for m in g.models if (g.id, m.id) not in selected)
        if not models:
            continue
        result.append(g if len(models) == len(g.models) else replace(g, models=models))
    return result


def select_all(groups: list[SpawnedGroup]) -> list[SelectedModel]:
    return [SelectedModel(g.id, m.id) for g in groups for m in g.models]


def toggle(selection: list[SelectedModel], ref: SelectedModel) -> list[SelectedModel]:
    """Add ``ref`` if absent, remove it if present (ctrl-click)."""
    if ref in selection:
        return [s for s in selection if s != ref]
    return [*selection, ref]


def prune_selection(
    groups: list[SpawnedGroup],
    selection: list[SelectedModel],
) -> list[SelectedModel]:
    """Drop references to models that no longer exist."""
    existing = {(g.id, m.id) for g in groups for m in g.models}
    return [s for s in selection if (s.group_id, s.model_id) in existing]


def box_select(
    groups: list[SpawnedGroup],
    rect: tuple[float, float, float, float],
) -> list[SelectedModel]:
    """Models whose drawn footprint touches the box (x1, y1, x2, y2), in mm.

    Corners may be given in any order; edges are inclusive.
    """
    x1, y1, x2, y2 = rect
    left, right = min(x1, x2), max(x1, x2)
    top, bottom = min(y1, y2), max(y1, y2)

    hits: list[SelectedModel] = []
    for g in groups:
        w, h = g.base.footprint
        for m in g.models:
            mx, my = g.absolute_position(m)
            if not (mx + w < left or mx > right or my + h < top or my > bottom):
                hits.append(SelectedModel(g.id, m.id))
    return hits
