from __future__ import annotations

from mudworld.domain.model import (
    Direction,
    EntityKind,
    NotificationEventKind,
    PlaceSnapshot,
    snapshot_place,
)
from mudworld.domain.model.snapshot import ExitSnapshot
from mudworld.domain.notifications import (
    CallerContext,
    diff_place_changes,
    place_destroyed_events,
)
from tests.helpers.world import make_place, make_place_class


def _exit(
    direction: Direction,
    target: int,
    *,
    opened: bool = True,
    locked: bool = False,
) -> ExitSnapshot:
    return ExitSnapshot(
        direction=direction,
        target_place_code=target,
        visible=True,
        opened=opened,
        locked=locked,
    )


def _snapshot(
    *,
    class_code: str = "forest",
    class_name: str = "Forest",
    name: str | None = None,
    exits: list[ExitSnapshot] | None = None,
) -> PlaceSnapshot:
    return PlaceSnapshot(
        code=1,
        name=name,
        class_code=class_code,
        class_name=class_name,
        exits={e.direction: e for e in exits or []},
    )


def test_identical_snapshots_produce_no_events() -> None:
    snapshot = _snapshot(exits=[_exit(Direction.EAST, 2)])

    assert diff_place_changes(snapshot, snapshot) == []


def test_closing_an_exit_emits_one_close_event() -> None:
    before = _snapshot(exits=[_exit(Direction.EAST, 2)])
    after = _snapshot(exits=[_exit(Direction.EAST, 2, opened=False)])

    events = diff_place_changes(before, after, context=CallerContext(world_name="alpha"))

    assert len(events) == 1
    event = events[0]
    assert event.event_kind is NotificationEventKind.PLACE_EXIT_CLOSE
    assert event.message_key == "place.exit.close"
    assert event.entity_type is EntityKind.PLACE
    assert event.entity_id == 1
    assert event.args == ("east",)
    assert event.target_entity_type is EntityKind.PLACE
    assert event.target_entity_id == 1
    assert event.world_name == "alpha"


def test_flag_flips_emit_edge_events_in_order() -> None:
    before = _snapshot(exits=[_exit(Direction.NORTH, 2, opened=False, locked=True)])
    after = _snapshot(exits=[_exit(Direction.NORTH, 2, opened=True, locked=False)])

    kinds = [e.event_kind for e in diff_place_changes(before, after)]

    assert kinds == [
        NotificationEventKind.PLACE_EXIT_OPEN,
        NotificationEventKind.PLACE_EXIT_UNLOCK,
    ]


def test_close_and_lock_fire_together() -> None:
    before = _snapshot(exits=[_exit(Direction.NORTH, 2)])
    after = _snapshot(exits=[_exit(Direction.NORTH, 2, opened=False, locked=True)])

    events = diff_place_changes(before, after)

    assert [(e.event_kind, e.args) for e in events] == [
        (NotificationEventKind.PLACE_EXIT_CLOSE, ("north",)),
        (NotificationEventKind.PLACE_EXIT_LOCK, ("north",)),
    ]


def test_new_exit_emits_a_pair_of_create_events() -> None:
    before = _snapshot()
    after = _snapshot(exits=[_exit(Direction.EAST, 42)])

    events = diff_place_changes(before, after)

    assert [(e.event_kind, e.entity_id, e.args) for e in events] == [
        (NotificationEventKind.PLACE_EXIT_CREATE, 1, ("west",)),
        (NotificationEventKind.PLACE_EXIT_CREATE, 42, ("east",)),
    ]
    assert events[1].target_entity_id == 42
    assert all(e.world_name is None for e in events)


def test_removed_exits_are_silent() -> None:
    before = _snapshot(exits=[_exit(Direction.EAST, 2)])
    after = _snapshot()

    assert diff_place_changes(before, after) == []


def test_class_change_comes_first() -> None:
    before = _snapshot(name="Old oak")
    after = _snapshot(
        class_code="ruins",
        class_name="Ruins",
        exits=[_exit(Direction.UP, 5)],
    )

    events = diff_place_changes(before, after)

    assert events[0].event_kind is NotificationEventKind.PLACE_CLASS_CHANGE
    assert events[0].args == ("Old oak", "Ruins")
    assert [e.event_kind for e in events[1:]] == [NotificationEventKind.PLACE_EXIT_CREATE] * 2


def test_destroyed_place_announces_its_display_name() -> None:
    place = make_place(make_place_class("hut", name="Hut"), code=9)

    events = place_destroyed_events(
        snapshot_place(place), context=CallerContext(world_name="beta")
    )

    assert len(events) == 1
    assert events[0].event_kind is NotificationEventKind.PLACE_DESTROY
    assert events[0].message_key == "place.destroy"
    assert events[0].entity_id == 9
    assert events[0].args == ("Hut",)
    assert events[0].world_name == "beta"
