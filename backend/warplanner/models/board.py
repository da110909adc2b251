"""Wire form of board data: groups, models and selection references.

Bases travel flat (``is_rectangular`` + ``base_size`` or ``width``/``length``)
and become a tagged ``BaseShape`` on the way in.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from warplanner.engine.board import (
    Model,
    RectangularBase,
    SelectedModel,
    SpawnedGroup,
    base_from_dimensions,
)


class ModelPayload(BaseModel):
    model_config = {"allow_inf_nan": False}

    id: str
    x: float = Field(..., description="mm from the group origin")
    y: float = Field(..., description="mm from the group origin")
    rotation: float | None = Field(default=None, description="Degrees, normalized to [0, 360)")


class GroupPayload(BaseModel):
    model_config = {"allow_inf_nan": False}

    unit_id: str
    unit_name: str = ""
    parent_unit_id: str | None = None
    parent_unit_name: str | None = None
    is_rectangular: bool = False
    base_size: float | None = Field(default=None, description="Round base diameter (mm)")
    width: float | None = Field(default=None, description="Rectangular base width (mm)")
    length: float | None = Field(default=None, description="Rectangular base length (mm)")
    models: list[ModelPayload] = Field(default_factory=list)
    group_x: float = Field(default=0.0, description="mm from the board origin")
    group_y: float = Field(default=0.0, description="mm from the board origin")

    def to_group(self) -> SpawnedGroup:
        return SpawnedGroup(
            id=self.unit_id,
            name=self.unit_name,
            base=base_from_dimensions(
                self.is_rectangular, self.base_size, self.width, self.length
            ),
            models=tuple(Model(m.id, m.x, m.y, m.rotation) for m in self.models),
            x=self.group_x,
            y=self.group_y,
            parent_unit_id=self.parent_unit_id,
            parent_unit_name=self.parent_unit_name,
        )

    @classmethod
    def from_group(cls, group: SpawnedGroup) -> GroupPayload:
        base = group.base
        if isinstance(base, RectangularBase):
            dims = {"is_rectangular": True, "width": base.width, "length": base.length}
        else:
            dims = {"is_rectangular": False, "base_size": base.diameter}
        return cls(
            unit_id=group.id,
            unit_name=group.name,
            parent_unit_id=group.parent_unit_id,
            parent_unit_name=group.parent_unit_name,
            models=[
                ModelPayload(id=m.id, x=m.x, y=m.y, rotation=m.rotation) for m in group.models
            ],
            group_x=group.x,
            group_y=group.y,
            **dims,
        )


class SelectionRef(BaseModel):
    model_config = {"protected_namespaces": ()}

    group_id: str
    model_id: str

    def to_selected(self) -> SelectedModel:
        return SelectedModel(self.group_id, self.model_id)

    @classmethod
    def from_selected(cls, ref: SelectedModel) -> SelectionRef:
        return cls(group_id=ref.group_id, model_id=ref.model_id)
