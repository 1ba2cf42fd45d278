"""Frozen copies of a place used to diff before/after states."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mudworld.domain.model.directions import Direction
    from mudworld.domain.model.place import Place, PlaceExit


@dataclass(frozen=True, slots=True, kw_only=True)
class ExitSnapshot:
    direction: Direction
    target_place_code: int
    visible: bool
    opened: bool
    locked: bool

    @classmethod
    def of(cls, place_exit: PlaceExit) -> ExitSnapshot:
        return cls(
            direction=place_exit.direction,
            target_place_code=place_exit.target_place_code,
            visible=place_exit.visible,
            opened=place_exit.opened,
            locked=place_exit.locked,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class PlaceSnapshot:
    code: int
    name: str | None
    class_code: str
    class_name: str
    attributes: dict[str, int] = field(default_factory=dict[str, int])
    exits: dict[Direction, ExitSnapshot] = field(default_factory=dict["Direction", ExitSnapshot])

    @property
    def display_name(self) -> str:
        return self.name if self.name is not None else self.class_name


def snapshot_place(place: Place) -> PlaceSnapshot:
    """Copy the observable state of ``place``; later mutation does not leak in."""

    if place.code is None:
        raise ValueError("cannot snapshot a place without a code")
    return PlaceSnapshot(
        code=place.code,
        name=place.name,
        class_code=place.place_class.code,
        class_name=place.place_class.name,
        attributes=place.attribute_values,
        exits={e.direction: ExitSnapshot.of(e) for e in place.exits},
    )
