"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from warplanner.engine.coherency import BoardCoherency, CoherencyResult, UnitCoherency
from warplanner.engine.nearest import NearestModel
from warplanner.engine.overlap import OverlapResult
from warplanner.engine.zones import Zone
from warplanner.models.board import GroupPayload, SelectionRef
from warplanner.utils.units import format_inches

# Ring coordinates are rendered, not measured; 0.01 mm is plenty.
_RING_DIGITS = 2


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    rounds: list[str] = Field(default_factory=list)


class UnitCoherencyResponse(BaseModel):
    unit_id: str
    unit_name: str = ""
    group_ids: list[str] = Field(default_factory=list)
    is_in_coherency: bool = True
    out_of_coherency_models: list[str] = Field(default_factory=list)
    components: list[list[str]] = Field(default_factory=list)

    @classmethod
    def from_unit(cls, unit: UnitCoherency) -> UnitCoherencyResponse:
        result: CoherencyResult = unit.result
        return cls(
            unit_id=unit.unit_id,
            unit_name=unit.unit_name,
            group_ids=list(unit.group_ids),
            is_in_coherency=result.is_in_coherency,
            out_of_coherency_models=sorted(result.out_of_coherency_models),
            components=[list(c) for c in result.components],
        )


class CoherencyResponse(BaseModel):
    units: list[UnitCoherencyResponse] = Field(default_factory=list)
    # group id -> bare model ids out of coherency
    by_group: dict[str, list[str]] = Field(default_factory=dict)
    incoherent_unit_count: int = 0

    @classmethod
    def from_board(cls, board: BoardCoherency) -> CoherencyResponse:
        return cls(
            units=[UnitCoherencyResponse.from_unit(u) for u in board.units],
            by_group={gid: sorted(ids) for gid, ids in board.by_group.items()},
            incoherent_unit_count=board.incoherent_unit_count,
        )


class NearestModelResponse(BaseModel):
    model_config = {"protected_namespaces": ()}

    group_id: str
    model_id: str
    key: str
    distance_mm: float
    distance_inches: float
    distance_label: str

    @classmethod
    def from_nearest(cls, n: NearestModel) -> NearestModelResponse:
        return cls(
            group_id=n.group.id,
            model_id=n.model.id,
            key=n.key,
            distance_mm=n.distance_mm,
            distance_inches=n.distance_inches,
            distance_label=format_inches(n.distance_mm),
        )


class NearestResponse(BaseModel):
    target: str
    nearest: list[NearestModelResponse] = Field(default_factory=list)


class OverlapResponse(BaseModel):
    overlapping: list[str] = Field(default_factory=list)
    pairs: list[tuple[str, str]] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: OverlapResult) -> OverlapResponse:
        return cls(overlapping=sorted(result.overlapping), pairs=list(result.pairs))


class ZoneResponse(BaseModel):
    key: str
    kind: str
    center: tuple[float, float]
    buffer_distance_mm: float
    rotation: float = 0.0
    radius: float | None = None
    width: float | None = None
    height: float | None = None
    corner_radius: float | None = None
    ring: list[tuple[float, float]] = Field(default_factory=list)

    @classmethod
    def from_zone(cls, zone: Zone) -> ZoneResponse:
        ring = [
            (round(x, _RING_DIGITS), round(y, _RING_DIGITS))
            for x, y in zone.polygon.exterior.coords
        ]
        return cls(
            key=zone.key,
            kind=zone.kind,
            center=zone.center,
            buffer_distance_mm=zone.buffer_distance,
            rotation=zone.rotation,
            radius=zone.radius,
            width=zone.width,
            height=zone.height,
            corner_radius=zone.corner_radius,
            ring=ring,
        )


class ZonesResponse(BaseModel):
    zones: list[ZoneResponse] = Field(default_factory=list)
    union_area_mm2: float = 0.0


class SelectionResponse(BaseModel):
    selection: list[SelectionRef] = Field(default_factory=list)


class BoardResponse(BaseModel):
    round_id: str
    groups: list[GroupPayload] = Field(default_factory=list)
    selection: list[SelectionRef] = Field(default_factory=list)
    coherency: CoherencyResponse = Field(default_factory=CoherencyResponse)
    overlapping: list[str] = Field(default_factory=list)
