"""Public domain model surface."""

from __future__ import annotations

from mudworld.domain.model.directions import (
    OPPOSED_DIRECTIONS,
    Direction,
    opposed_direction,
    parse_direction,
)
from mudworld.domain.model.enums import EntityKind, NotificationEventKind
from mudworld.domain.model.notifications import MESSAGE_KEYS, NotificationEvent
from mudworld.domain.model.place import (
    PLACE_HP_ATTR,
    PLACE_MAX_HP_ATTR,
    Place,
    PlaceAttr,
    PlaceExit,
    exit_identity,
    same_exit,
)
from mudworld.domain.model.place_class import PlaceClass, PlaceClassAttr
from mudworld.domain.model.snapshot import ExitSnapshot, PlaceSnapshot, snapshot_place

__all__ = [  # noqa: RUF022
    # places
    "Place",
    "PlaceAttr",
    "PlaceExit",
    "PlaceClass",
    "PlaceClassAttr",
    "PLACE_HP_ATTR",
    "PLACE_MAX_HP_ATTR",
    "exit_identity",
    "same_exit",
    # directions
    "Direction",
    "OPPOSED_DIRECTIONS",
    "opposed_direction",
    "parse_direction",
    # snapshots
    "ExitSnapshot",
    "PlaceSnapshot",
    "snapshot_place",
    # notifications
    "MESSAGE_KEYS",
    "NotificationEvent",
    # enums
    "EntityKind",
    "NotificationEventKind",
]
