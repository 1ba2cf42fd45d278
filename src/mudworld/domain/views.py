"""Read-side view of a place, with exits named after their destination."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mudworld.domain.model import Direction, Place
    from mudworld.domain.ports.persistence import PlaceRepository


@dataclass(frozen=True, slots=True, kw_only=True)
class ExitView:
    direction: Direction
    target_place_code: int
    name: str | None
    visible: bool
    opened: bool
    locked: bool


@dataclass(frozen=True, slots=True, kw_only=True)
class PlaceView:
    code: int
    name: str | None
    class_code: str
    attrs: dict[str, int] = field(default_factory=dict[str, int])
    exits: dict[Direction, ExitView] = field(default_factory=dict["Direction", ExitView])


def build_place_view(place: Place, places: PlaceRepository) -> PlaceView:
    """Describe ``place``; each exit is named after its target's class.

    Exits pointing at places that no longer exist get ``name=None``.
    """

    if place.code is None:
        raise ValueError("cannot describe a place without a code")

    exits: dict[Direction, ExitView] = {}
    for place_exit in place.exits:
        target = places.get(place_exit.target_place_code)
        exits[place_exit.direction] = ExitView(
            direction=place_exit.direction,
            target_place_code=place_exit.target_place_code,
            name=target.place_class.name if target is not None else None,
            visible=place_exit.visible,
            opened=place_exit.opened,
            locked=place_exit.locked,
        )

    return PlaceView(
        code=place.code,
        name=place.name,
        class_code=place.place_class.code,
        attrs=place.attribute_values,
        exits=exits,
    )
