"""POST /api/zones/*: deep strike and aura zones for rendering."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from warplanner.config import Settings
from warplanner.dependencies import get_settings
from warplanner.engine.zones import Zone, aura_zones, deep_strike_zones, exclusion_union
from warplanner.models.requests import AuraRequest, GroupsRequest
from warplanner.models.responses import ZoneResponse, ZonesResponse
from warplanner.utils.units import inches_to_mm

router = APIRouter(prefix="/zones")


def _zones_response(zones: list[Zone]) -> ZonesResponse:
    return ZonesResponse(
        zones=[ZoneResponse.from_zone(z) for z in zones],
        union_area_mm2=round(float(exclusion_union(zones).area), 2),
    )


@router.post("/deep-strike", response_model=ZonesResponse)
async def deep_strike(req: GroupsRequest) -> ZonesResponse:
    groups = [g.to_group() for g in req.groups]
    return _zones_response(deep_strike_zones(groups))


@router.post("/auras", response_model=ZonesResponse)
async def auras(req: AuraRequest, settings: Settings = Depends(get_settings)) -> ZonesResponse:
    groups = [g.to_group() for g in req.groups]
    default_inches = req.default_inches or settings.default_aura_inches
    distances = {name: inches_to_mm(inches) for name, inches in req.aura_inches.items()}
    return _zones_response(aura_zones(groups, distances, inches_to_mm(default_inches)))
