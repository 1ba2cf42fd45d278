"""Places and the attributes / exits they own.

Aggregate root: ``Place`` owns its ``PlaceAttr`` and ``PlaceExit`` children.
Their lifetime never exceeds the place's.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mudworld.domain.model.directions import Direction
    from mudworld.domain.model.place_class import PlaceClass

PLACE_HP_ATTR: Final[str] = "HP"
PLACE_MAX_HP_ATTR: Final[str] = "MAXHP"


@dataclass(eq=False, kw_only=True)
class PlaceAttr:
    """Attribute value owned by a place; identity is (place, code)."""

    code: str
    value: int


@dataclass(eq=False, kw_only=True)
class PlaceExit:
    """Directed connection from the owning place to ``target_place_code``."""

    direction: Direction
    target_place_code: int
    visible: bool = True
    opened: bool = True
    locked: bool = False


def exit_identity(place_exit: PlaceExit) -> Direction:
    """Stable identity of an exit inside its place."""

    return place_exit.direction


def same_exit(left: PlaceExit, right: PlaceExit) -> bool:
    """Whether two exits denote the same connection, whatever their flags."""

    return exit_identity(left) == exit_identity(right)


@dataclass(eq=False, kw_only=True)
class Place:
    place_class: PlaceClass
    name: str | None = None
    code: int | None = None

    # Owned children
    _attrs: list[PlaceAttr] = field(default_factory=list["PlaceAttr"], repr=False)
    _exits: list[PlaceExit] = field(default_factory=list["PlaceExit"], repr=False)

    @property
    def display_name(self) -> str:
        return self.name if self.name is not None else self.place_class.name

    # Attributes
    @property
    def attrs(self) -> tuple[PlaceAttr, ...]:
        return tuple(self._attrs)

    @property
    def attribute_values(self) -> dict[str, int]:
        return {attr.code: attr.value for attr in self._attrs}

    def find_attr(self, code: str) -> PlaceAttr | None:
        return next((attr for attr in self._attrs if attr.code == code), None)

    def add_attr(self, code: str, value: int) -> PlaceAttr:
        if self.find_attr(code) is not None:
            raise ValueError(f"attribute {code} already set on place")
        attr = PlaceAttr(code=code, value=value)
        self._attrs.append(attr)
        return attr

    def remove_attr(self, attr: PlaceAttr) -> None:
        if attr not in self._attrs:
            raise ValueError("attribute not owned by this place")
        self._attrs.remove(attr)

    # Exits
    @property
    def exits(self) -> tuple[PlaceExit, ...]:
        return tuple(self._exits)

    def find_exit(self, direction: Direction) -> PlaceExit | None:
        return next((e for e in self._exits if exit_identity(e) == direction), None)

    def add_exit(
        self,
        direction: Direction,
        target_place_code: int,
        *,
        visible: bool = True,
        opened: bool = True,
        locked: bool = False,
    ) -> PlaceExit:
        if self.find_exit(direction) is not None:
            raise ValueError(f"exit {direction} already exists on place")
        place_exit = PlaceExit(
            direction=direction,
            target_place_code=target_place_code,
            visible=visible,
            opened=opened,
            locked=locked,
        )
        self._exits.append(place_exit)
        return place_exit

    def replace_exits(self, exits: Iterable[PlaceExit]) -> None:
        """Swap the whole exit collection; exits left out are dropped."""

        replacement = list(exits)
        directions = [exit_identity(e) for e in replacement]
        if len(set(directions)) != len(directions):
            raise ValueError("exit directions must be unique")
        self._exits = replacement
