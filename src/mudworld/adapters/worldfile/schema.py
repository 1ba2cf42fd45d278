"""Pydantic models for JSON world files."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from mudworld.domain.model import Direction, PlaceClass, parse_direction
from mudworld.domain.reconciliation.requests import ExitRequest, PlaceRequest


class WorldFileModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PlaceClassPayload(WorldFileModel):
    code: str = Field(min_length=1)
    name: str
    attrs: dict[str, int] = Field(default_factory=dict)
    demised_place_class_code: str | None = Field(default=None, alias="demisedPlaceClassCode")

    def to_domain(self) -> PlaceClass:
        return PlaceClass.create(
            code=self.code,
            name=self.name,
            attributes=self.attrs,
            demised_place_class_code=self.demised_place_class_code,
        )


class PlaceClassCatalogue(WorldFileModel):
    place_classes: list[PlaceClassPayload] = Field(alias="placeClasses")


class ExitPayload(WorldFileModel):
    target_place_code: int = Field(alias="targetPlaceCode")
    visible: bool = True
    opened: bool = True
    locked: bool = False

    def to_request(self) -> ExitRequest:
        return ExitRequest(
            target_place_code=self.target_place_code,
            visible=self.visible,
            opened=self.opened,
            locked=self.locked,
        )


class PlaceRequestPayload(WorldFileModel):
    class_code: str = Field(alias="classCode")
    name: str | None = None
    attrs: dict[str, int] = Field(default_factory=dict)
    exits: dict[str, ExitPayload] | None = None

    def to_request(self) -> PlaceRequest:
        """Convert to a domain request; unknown directions raise."""

        exits: dict[Direction, ExitRequest] | None = None
        if self.exits is not None:
            exits = {
                parse_direction(direction): payload.to_request()
                for direction, payload in self.exits.items()
            }
        return PlaceRequest(
            class_code=self.class_code,
            name=self.name,
            attrs=dict(self.attrs),
            exits=exits,
        )
