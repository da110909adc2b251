"""BoardStore: the single owner of mutable board state.

One board per mission round. Each board holds its groups (in spawn order)
and the current selection. Every mutation replaces the stored snapshot with
a new value built by the engine; the engine itself never mutates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from warplanner.engine import layout, selection as sel
from warplanner.engine.board import SelectedModel, SpawnableUnit, SpawnedGroup
from warplanner.engine.config import LayoutConfig

logger = logging.getLogger(__name__)


class BoardLookupError(LookupError):
    """Unknown round, group or model."""


class DuplicateUnitError(ValueError):
    """A unit with this id is already on the round's board."""


@dataclass
class RoundBoard:
    groups: list[SpawnedGroup] = field(default_factory=list)
    selection: list[SelectedModel] = field(default_factory=list)


class BoardStore:
    def __init__(self, rounds: list[str], layout_config: LayoutConfig | None = None) -> None:
        self.layout_config = layout_config or LayoutConfig()
        self._boards: dict[str, RoundBoard] = {r: RoundBoard() for r in rounds}

    @property
    def rounds(self) -> list[str]:
        return list(self._boards)

    def board(self, round_id: str) -> RoundBoard:
        board = self._boards.get(round_id)
        if board is None:
            logger.warning("Unknown round %r", round_id)
            raise BoardLookupError(f"No such round: {round_id}")
        return board

    def groups(self, round_id: str) -> list[SpawnedGroup]:
        return list(self.board(round_id).groups)

    def selection(self, round_id: str) -> list[SelectedModel]:
        return list(self.board(round_id).selection)

    def group(self, round_id: str, group_id: str) -> SpawnedGroup:
        for g in self.board(round_id).groups:
            if g.id == group_id:
                return g
        logger.warning("Unknown group %r in round %r", group_id, round_id)
        raise BoardLookupError(f"No such group: {group_id}")

    def _require_model(self, group: SpawnedGroup, model_id: str) -> None:
        if group.get_model(model_id) is None:
            logger.warning("Unknown model %r in group %r", model_id, group.id)
            raise BoardLookupError(f"No such model: {group.id}/{model_id}")

    def _replace_group(self, round_id: str, updated: SpawnedGroup) -> SpawnedGroup:
        board = self.board(round_id)
        board.groups = [updated if g.id == updated.id else g for g in board.groups]
        return updated

    # --- groups ---

    def spawn(self, round_id: str, unit: SpawnableUnit) -> SpawnedGroup:
        board = self.board(round_id)
        if any(g.id == unit.unit_id for g in board.groups):
            raise DuplicateUnitError(f"Unit already deployed: {unit.unit_id}")
        group = layout.spawn_group(unit, self.layout_config)
        board.groups = [*board.groups, group]
        logger.info(
            "Spawned %s (%d models) in round %s", unit.unit_name, len(group.models), round_id
        )
        return group

    def delete_group(self, round_id: str, group_id: str) -> None:
        self.group(round_id, group_id)
        board = self.board(round_id)
        board.groups = [g for g in board.groups if g.id != group_id]
        board.selection = [s for s in board.selection if s.group_id != group_id]
        logger.info("Deleted group %s from round %s", group_id, round_id)

    def move_group(self, round_id: str, group_id: str, x: float, y: float) -> SpawnedGroup:
        group = self.group(round_id, group_id)
        return self._replace_group(round_id, layout.move_group(group, x, y))

    def move_model(
        self, round_id: str, group_id: str, model_id: str, x: float, y: float
    ) -> SpawnedGroup:
        group = self.group(round_id, group_id)
        self._require_model(group, model_id)
        return self._replace_group(round_id, layout.move_model(group, model_id, x, y))

    def rotate_model(
        self, round_id: str, group_id: str, model_id: str, degrees: float
    ) -> SpawnedGroup:
        group = self.group(round_id, group_id)
        self._require_model(group, model_id)
        return self._replace_group(round_id, layout.rotate_model(group, model_id, degrees))

    def line_up(self, round_id: str, group_id: str, spacing_mm: float | None = None) -> SpawnedGroup:
        group = self.group(round_id, group_id)
        gap = self.layout_config.spacing_mm if spacing_mm is None else spacing_mm
        return self._replace_group(round_id, layout.line_up(group, gap))

    # --- selection ---

    def set_selection(self, round_id: str, refs: list[SelectedModel]) -> list[SelectedModel]:
        board = self.board(round_id)
        # Unknown references are dropped rather than rejected.
        board.selection = sel.prune_selection(board.groups, list(dict.fromkeys(refs)))
        return list(board.selection)

    def toggle_selection(self, round_id: str, ref: SelectedModel) -> list[SelectedModel]:
        board = self.board(round_id)
        return self.set_selection(round_id, sel.toggle(board.selection, ref))

    def select_all(self, round_id: str) -> list[SelectedModel]:
        board = self.board(round_id)
        board.selection = sel.select_all(board.groups)
        return list(board.selection)

    def clear_selection(self, round_id: str) -> None:
        self.board(round_id).selection = []

    def box_select(
        self, round_id: str, rect: tuple[float, float, float, float]
    ) -> list[SelectedModel]:
        board = self.board(round_id)
        board.selection = sel.box_select(board.groups, rect)
        return list(board.selection)

    def delete_selected(self, round_id: str) -> int:
        board = self.board(round_id)
        removed = len(board.selection)
        if removed:
            board.groups = sel.delete_selected(board.groups, board.selection)
            board.selection = []
            logger.info("Deleted %d selected model(s) from round %s", removed, round_id)
        return removed

    def translate_selection(self, round_id: str, dx: float, dy: float) -> list[SpawnedGroup]:
        board = self.board(round_id)
        board.groups = layout.translate_models(board.groups, board.selection, dx, dy)
        return list(board.groups)
