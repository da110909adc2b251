"""/api/rounds/*: per-round board state: spawn, move, rotate, select, delete."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import APIRouter, Depends, HTTPException

from warplanner.dependencies import get_store
from warplanner.engine.coherency import evaluate_board
from warplanner.engine.overlap import find_overlaps
from warplanner.models.board import GroupPayload, SelectionRef
from warplanner.models.requests import (
    BoxSelectRequest,
    LineUpRequest,
    PositionRequest,
    RotateRequest,
    SelectionRequest,
    SpawnRequest,
    TranslateRequest,
)
from warplanner.models.responses import BoardResponse, CoherencyResponse, SelectionResponse
from warplanner.store import BoardLookupError, BoardStore, DuplicateUnitError
from warplanner.utils.units import px_to_mm

router = APIRouter(prefix="/rounds")


@contextmanager
def _store_errors() -> Iterator[None]:
    try:
        yield
    except BoardLookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except DuplicateUnitError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e


def _board_response(store: BoardStore, round_id: str) -> BoardResponse:
    groups = store.groups(round_id)
    return BoardResponse(
        round_id=round_id,
        groups=[GroupPayload.from_group(g) for g in groups],
        selection=[SelectionRef.from_selected(s) for s in store.selection(round_id)],
        coherency=CoherencyResponse.from_board(evaluate_board(groups)),
        overlapping=sorted(find_overlaps(groups).overlapping),
    )


def _selection_response(store: BoardStore, round_id: str) -> SelectionResponse:
    return SelectionResponse(
        selection=[SelectionRef.from_selected(s) for s in store.selection(round_id)]
    )


@router.get("")
async def list_rounds(store: BoardStore = Depends(get_store)) -> list[str]:
    return store.rounds


@router.get("/{round_id}", response_model=BoardResponse)
async def get_board(round_id: str, store: BoardStore = Depends(get_store)) -> BoardResponse:
    with _store_errors():
        return _board_response(store, round_id)


# --- groups ---


@router.post("/{round_id}/groups", response_model=BoardResponse, status_code=201)
async def spawn(
    round_id: str, req: SpawnRequest, store: BoardStore = Depends(get_store)
) -> BoardResponse:
    with _store_errors():
        store.spawn(round_id, req.to_unit())
        return _board_response(store, round_id)


@router.delete("/{round_id}/groups/{group_id}", response_model=BoardResponse)
async def delete_group(
    round_id: str, group_id: str, store: BoardStore = Depends(get_store)
) -> BoardResponse:
    with _store_errors():
        store.delete_group(round_id, group_id)
        return _board_response(store, round_id)


@router.patch("/{round_id}/groups/{group_id}/position", response_model=BoardResponse)
async def move_group(
    round_id: str,
    group_id: str,
    req: PositionRequest,
    store: BoardStore = Depends(get_store),
) -> BoardResponse:
    with _store_errors():
        store.move_group(round_id, group_id, req.x, req.y)
        return _board_response(store, round_id)


@router.patch(
    "/{round_id}/groups/{group_id}/models/{model_id}/position",
    response_model=BoardResponse,
)
async def move_model(
    round_id: str,
    group_id: str,
    model_id: str,
    req: PositionRequest,
    store: BoardStore = Depends(get_store),
) -> BoardResponse:
    with _store_errors():
        store.move_model(round_id, group_id, model_id, req.x, req.y)
        return _board_response(store, round_id)


@router.patch(
    "/{round_id}/groups/{group_id}/models/{model_id}/rotation",
    response_model=BoardResponse,
)
async def rotate_model(
    round_id: str,
    group_id: str,
    model_id: str,
    req: RotateRequest,
    store: BoardStore = Depends(get_store),
) -> BoardResponse:
    with _store_errors():
        store.rotate_model(round_id, group_id, model_id, req.degrees)
        return _board_response(store, round_id)


@router.post("/{round_id}/groups/{group_id}/line-up", response_model=BoardResponse)
async def line_up(
    round_id: str,
    group_id: str,
    req: LineUpRequest,
    store: BoardStore = Depends(get_store),
) -> BoardResponse:
    with _store_errors():
        store.line_up(round_id, group_id, req.spacing_mm)
        return _board_response(store, round_id)


# --- selection ---


@router.put("/{round_id}/selection", response_model=SelectionResponse)
async def set_selection(
    round_id: str, req: SelectionRequest, store: BoardStore = Depends(get_store)
) -> SelectionResponse:
    with _store_errors():
        store.set_selection(round_id, [r.to_selected() for r in req.models])
        return _selection_response(store, round_id)


@router.post("/{round_id}/selection/toggle", response_model=SelectionResponse)
async def toggle_selection(
    round_id: str, req: SelectionRef, store: BoardStore = Depends(get_store)
) -> SelectionResponse:
    with _store_errors():
        store.toggle_selection(round_id, req.to_selected())
        return _selection_response(store, round_id)


@router.post("/{round_id}/selection/all", response_model=SelectionResponse)
async def select_all(round_id: str, store: BoardStore = Depends(get_store)) -> SelectionResponse:
    with _store_errors():
        store.select_all(round_id)
        return _selection_response(store, round_id)


@router.delete("/{round_id}/selection", response_model=SelectionResponse)
async def clear_selection(
    round_id: str, store: BoardStore = Depends(get_store)
) -> SelectionResponse:
    with _store_errors():
        store.clear_selection(round_id)
        return _selection_response(store, round_id)


@router.post("/{round_id}/selection/box", response_model=SelectionResponse)
async def box_select(
    round_id: str, req: BoxSelectRequest, store: BoardStore = Depends(get_store)
) -> SelectionResponse:
    rect = (req.x1, req.y1, req.x2, req.y2)
    if req.scale is not None:
        rect = tuple(px_to_mm(v, req.scale) for v in rect)
    with _store_errors():
        store.box_select(round_id, rect)
        return _selection_response(store, round_id)


@router.post("/{round_id}/selection/delete", response_model=BoardResponse)
async def delete_selected(
    round_id: str, store: BoardStore = Depends(get_store)
) -> BoardResponse:
    with _store_errors():
        store.delete_selected(round_id)
        return _board_response(store, round_id)


@router.post("/{round_id}/selection/translate", response_model=BoardResponse)
async def translate_selection(
    round_id: str, req: TranslateRequest, store: BoardStore = Depends(get_store)
) -> BoardResponse:
    with _store_errors():
        store.translate_selection(round_id, req.dx, req.dy)
        return _board_response(store, round_id)
