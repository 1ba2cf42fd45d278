"""Notification events produced from place changes."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from mudworld.domain.model.enums import EntityKind, NotificationEventKind

if TYPE_CHECKING:
    from collections.abc import Mapping

MESSAGE_KEYS: Final[Mapping[NotificationEventKind, str]] = MappingProxyType(
    {
        NotificationEventKind.PLACE_DESTROY: "place.destroy",
        NotificationEventKind.PLACE_CLASS_CHANGE: "place.class.change",
        NotificationEventKind.PLACE_EXIT_CREATE: "place.exit.create",
        NotificationEventKind.PLACE_EXIT_OPEN: "place.exit.open",
        NotificationEventKind.PLACE_EXIT_CLOSE: "place.exit.close",
        NotificationEventKind.PLACE_EXIT_LOCK: "place.exit.lock",
        NotificationEventKind.PLACE_EXIT_UNLOCK: "place.exit.unlock",
    }
)


@dataclass(frozen=True, slots=True, kw_only=True)
class NotificationEvent:
    """Something that happened to an entity, ready for dispatch.

    ``args`` are positional message arguments; their meaning depends on
    ``event_kind``.
    """

    entity_type: EntityKind
    entity_id: int
    event_kind: NotificationEventKind
    message_key: str
    args: tuple[str, ...] = ()
    target_entity_type: EntityKind | None = None
    target_entity_id: int | None = None
    world_name: str | None = None
