"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """Kind of entity a notification talks about."""

    PLACE = "PLACE"


class NotificationEventKind(StrEnum):
    PLACE_DESTROY = "PLACE_DESTROY"
    PLACE_CLASS_CHANGE = "PLACE_CLASS_CHANGE"
    PLACE_EXIT_CREATE = "PLACE_EXIT_CREATE"
    PLACE_EXIT_OPEN = "PLACE_EXIT_OPEN"
    PLACE_EXIT_CLOSE = "PLACE_EXIT_CLOSE"
    PLACE_EXIT_LOCK = "PLACE_EXIT_LOCK"
    PLACE_EXIT_UNLOCK = "PLACE_EXIT_UNLOCK"
