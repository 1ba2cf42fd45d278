"""Derive notification events by comparing two snapshots of a place.

Rules run in a fixed order so the produced list is deterministic:

1) place class change
2) newly created exits (two events each: this side and the other side)
3) opened/locked flips on exits present before and after
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mudworld.domain.model import (
    MESSAGE_KEYS,
    EntityKind,
    NotificationEvent,
    NotificationEventKind,
    opposed_direction,
)
from mudworld.domain.notifications.context import world_name_of

if TYPE_CHECKING:
    from mudworld.domain.model import ExitSnapshot, PlaceSnapshot
    from mudworld.domain.notifications.context import CallerContext


def diff_place_changes(
    before: PlaceSnapshot,
    after: PlaceSnapshot,
    *,
    context: CallerContext | None = None,
) -> list[NotificationEvent]:
    """Return the events describing how ``before`` became ``after``."""

    world_name = world_name_of(context)
    events: list[NotificationEvent] = []
    events.extend(_class_change_events(before, after, world_name))
    events.extend(_created_exit_events(before, after, world_name))
    events.extend(_updated_exit_events(before, after, world_name))
    return events


def place_destroyed_events(
    destroyed: PlaceSnapshot,
    *,
    context: CallerContext | None = None,
) -> list[NotificationEvent]:
    """Return the events announcing that ``destroyed`` is gone."""

    return [
        _place_event(
            destroyed.code,
            NotificationEventKind.PLACE_DESTROY,
            (destroyed.display_name,),
            world_name_of(context),
        )
    ]


def _place_event(
    place_code: int,
    kind: NotificationEventKind,
    args: tuple[str, ...],
    world_name: str | None,
) -> NotificationEvent:
    return NotificationEvent(
        entity_type=EntityKind.PLACE,
        entity_id=place_code,
        event_kind=kind,
        message_key=MESSAGE_KEYS[kind],
        args=args,
        target_entity_type=EntityKind.PLACE,
        target_entity_id=place_code,
        world_name=world_name,
    )


def _class_change_events(
    before: PlaceSnapshot,
    after: PlaceSnapshot,
    world_name: str | None,
) -> list[NotificationEvent]:
    if before.class_code == after.class_code:
        return []
    return [
        _place_event(
            after.code,
            NotificationEventKind.PLACE_CLASS_CHANGE,
            (before.display_name, after.class_name),
            world_name,
        )
    ]


def _created_exit_events(
    before: PlaceSnapshot,
    after: PlaceSnapshot,
    world_name: str | None,
) -> list[NotificationEvent]:
    events: list[NotificationEvent] = []
    for direction in sorted(after.exits):
        if direction in before.exits:
            continue
        place_exit = after.exits[direction]
        events.append(
            _place_event(
                after.code,
                NotificationEventKind.PLACE_EXIT_CREATE,
                (opposed_direction(direction).value,),
                world_name,
            )
        )
        events.append(
            _place_event(
                place_exit.target_place_code,
                NotificationEventKind.PLACE_EXIT_CREATE,
                (direction.value,),
                world_name,
            )
        )
    return events


def _updated_exit_events(
    before: PlaceSnapshot,
    after: PlaceSnapshot,
    world_name: str | None,
) -> list[NotificationEvent]:
    events: list[NotificationEvent] = []
    for direction in sorted(before.exits):
        after_exit = after.exits.get(direction)
        if after_exit is None:
            continue
        for kind in _exit_flag_changes(before.exits[direction], after_exit):
            events.append(_place_event(after.code, kind, (direction.value,), world_name))
    return events


def _exit_flag_changes(before: ExitSnapshot, after: ExitSnapshot) -> list[NotificationEventKind]:
    kinds: list[NotificationEventKind] = []
    if before.opened and not after.opened:
        kinds.append(NotificationEventKind.PLACE_EXIT_CLOSE)
    if not before.opened and after.opened:
        kinds.append(NotificationEventKind.PLACE_EXIT_OPEN)
    if before.locked and not after.locked:
        kinds.append(NotificationEventKind.PLACE_EXIT_UNLOCK)
    if not before.locked and after.locked:
        kinds.append(NotificationEventKind.PLACE_EXIT_LOCK)
    return kinds
