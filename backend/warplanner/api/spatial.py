"""POST /api/coherency, /api/nearest, /api/overlaps: stateless board queries."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from warplanner.engine.board import find_group, group_by_parent_unit, model_key
from warplanner.engine.coherency import evaluate_board
from warplanner.engine.nearest import find_nearest_models
from warplanner.engine.overlap import find_overlaps
from warplanner.models.requests import GroupsRequest, NearestRequest
from warplanner.models.responses import (
    CoherencyResponse,
    NearestModelResponse,
    NearestResponse,
    OverlapResponse,
)

router = APIRouter()


@router.post("/coherency", response_model=CoherencyResponse)
async def coherency(req: GroupsRequest) -> CoherencyResponse:
    groups = [g.to_group() for g in req.groups]
    return CoherencyResponse.from_board(evaluate_board(groups))


@router.post("/nearest", response_model=NearestResponse)
async def nearest(req: NearestRequest) -> NearestResponse:
    groups = [g.to_group() for g in req.groups]
    target_group = find_group(groups, req.group_id)
    if target_group is None:
        raise HTTPException(status_code=404, detail=f"No such group: {req.group_id}")
    target = target_group.get_model(req.model_id)
    if target is None:
        raise HTTPException(
            status_code=404, detail=f"No such model: {req.group_id}/{req.model_id}"
        )

    # Parent units are searched as a whole.
    scope = None
    if target_group.parent_unit_id:
        linked, _ = group_by_parent_unit(groups)
        scope = linked[target_group.parent_unit_id]

    found = find_nearest_models(target, target_group, scope)
    return NearestResponse(
        target=model_key(target_group.id, target.id),
        nearest=[NearestModelResponse.from_nearest(n) for n in found],
    )


@router.post("/overlaps", response_model=OverlapResponse)
async def overlaps(req: GroupsRequest) -> OverlapResponse:
    groups = [g.to_group() for g in req.groups]
    return OverlapResponse.from_result(find_overlaps(groups))
