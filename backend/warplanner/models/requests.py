"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from warplanner.engine.board import SpawnableUnit, base_from_dimensions
from warplanner.engine.constants import MAX_UNIT_MODELS
from warplanner.models.board import GroupPayload, SelectionRef


class GroupsRequest(BaseModel):
    model_config = {"allow_inf_nan": False}

    groups: list[GroupPayload] = Field(..., description="Positioned groups on the board")


class NearestRequest(BaseModel):
    model_config = {"allow_inf_nan": False, "protected_namespaces": ()}

    groups: list[GroupPayload] = Field(..., description="Positioned groups on the board")
    group_id: str = Field(..., description="Group owning the target model")
    model_id: str = Field(..., description="Target model")


class AuraRequest(BaseModel):
    model_config = {"allow_inf_nan": False}

    groups: list[GroupPayload] = Field(..., description="Positioned groups on the board")
    aura_inches: dict[str, float] = Field(
        default_factory=dict,
        description="Aura range per unit name, in inches",
    )
    default_inches: float | None = Field(
        default=None,
        gt=0,
        description="Range for unlisted units; falls back to the configured default",
    )


class SpawnRequest(BaseModel):
    model_config = {"allow_inf_nan": False, "protected_namespaces": ()}

    unit_id: str
    unit_name: str
    model_count: int = Field(..., ge=1, le=MAX_UNIT_MODELS)
    parent_unit_id: str | None = None
    parent_unit_name: str | None = None
    is_rectangular: bool = False
    base_size: float | None = None
    width: float | None = None
    length: float | None = None

    def to_unit(self) -> SpawnableUnit:
        return SpawnableUnit(
            unit_id=self.unit_id,
            unit_name=self.unit_name,
            model_count=self.model_count,
            base=base_from_dimensions(
                self.is_rectangular, self.base_size, self.width, self.length
            ),
            parent_unit_id=self.parent_unit_id,
            parent_unit_name=self.parent_unit_name,
        )


class PositionRequest(BaseModel):
    model_config = {"allow_inf_nan": False}

    x: float = Field(..., description="mm")
    y: float = Field(..., description="mm")


class RotateRequest(BaseModel):
    model_config = {"allow_inf_nan": False}

    degrees: float


class LineUpRequest(BaseModel):
    model_config = {"allow_inf_nan": False}

    spacing_mm: float | None = Field(default=None, ge=0)


class SelectionRequest(BaseModel):
    models: list[SelectionRef] = Field(default_factory=list)


class BoxSelectRequest(BaseModel):
    model_config = {"allow_inf_nan": False}

    x1: float
    y1: float
    x2: float
    y2: float
    scale: float | None = Field(
        default=None,
        gt=0,
        description="Pixels per mm. When set, the box is in screen pixels.",
    )


class TranslateRequest(BaseModel):
    model_config = {"allow_inf_nan": False}

    dx: float = Field(..., description="mm")
    dy: float = Field(..., description="mm")
