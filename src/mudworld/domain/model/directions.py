"""Exit directions and their opposed counterparts."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from mudworld.domain.errors import UnknownDirectionError

if TYPE_CHECKING:
    from collections.abc import Mapping


class Direction(StrEnum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTHEAST = "northeast"
    SOUTHWEST = "southwest"
    NORTHWEST = "northwest"
    SOUTHEAST = "southeast"
    UP = "up"
    DOWN = "down"
    IN = "in"
    OUT = "out"


_PAIRS: Final[tuple[tuple[Direction, Direction], ...]] = (
    (Direction.NORTH, Direction.SOUTH),
    (Direction.EAST, Direction.WEST),
    (Direction.NORTHEAST, Direction.SOUTHWEST),
    (Direction.NORTHWEST, Direction.SOUTHEAST),
    (Direction.UP, Direction.DOWN),
    (Direction.IN, Direction.OUT),
)

OPPOSED_DIRECTIONS: Final[Mapping[Direction, Direction]] = MappingProxyType(
    {a: b for a, b in _PAIRS} | {b: a for a, b in _PAIRS}
)


def opposed_direction(direction: Direction) -> Direction:
    """Return the direction leading back along an exit."""

    return OPPOSED_DIRECTIONS[direction]


def parse_direction(value: str) -> Direction:
    """Parse a direction name (case-insensitive)."""

    try:
        return Direction(value.strip().lower())
    except ValueError as exc:
        raise UnknownDirectionError(value) from exc
