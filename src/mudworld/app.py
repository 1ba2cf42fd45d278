"""Application orchestration entry points.

Every service runs the same way: open a unit of work, snapshot what is about
to change, let the reconciliation engine do its work, commit, snapshot again,
and only then derive and dispatch notification events.
"""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from mudworld.adapters.notifications import (
    LoggingNotificationDispatcher,
    build_notification_dispatcher,
)
from mudworld.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyWorldUnitOfWork,
    is_started,
    startup,
)
from mudworld.config import ConfigurationError, get_caller_context, get_notification_config
from mudworld.domain.errors import PlaceNotFoundError
from mudworld.domain.model import snapshot_place
from mudworld.domain.notifications import diff_place_changes, place_destroyed_events
from mudworld.domain.ports.unit_of_work import WorldUnitOfWork
from mudworld.domain.reconciliation import PlaceReconciliationEngine
from mudworld.domain.views import build_place_view

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mudworld.domain.model import Direction, NotificationEvent, PlaceClass, PlaceSnapshot
    from mudworld.domain.notifications import CallerContext
    from mudworld.domain.ports.notifications import NotificationDispatcher
    from mudworld.domain.reconciliation import (
        OutcomeStatus,
        PlaceRequest,
        ReconciliationOutcome,
    )
    from mudworld.domain.views import PlaceView

UnitOfWorkFactory = Callable[[], WorldUnitOfWork]

log = getLogger(__name__)


def get_place(
    place_id: int,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> PlaceView:
    """Describe a stored place, naming each exit after its destination."""

    with _resolve_unit_of_work(unit_of_work_factory)() as uow:
        place = uow.repositories.places.get(place_id)
        if place is None:
            raise PlaceNotFoundError(place_id)
        return build_place_view(place, uow.repositories.places)


def update_place(
    place_id: int,
    request: PlaceRequest,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    dispatcher: NotificationDispatcher | None = None,
    context: CallerContext | None = None,
) -> PlaceView:
    """Reconcile a stored place with ``request`` and announce what changed.

    Raises ``PlaceNotFoundError`` when the update ran the place out of HP and
    it had no demise class; the deletion is committed and announced first.
    """

    effective_context = _resolve_context(context)
    effective_dispatcher = _resolve_dispatcher(dispatcher)
    with _resolve_unit_of_work(unit_of_work_factory)() as uow:
        before = _snapshot_existing(uow, place_id)
        outcome = _engine(uow).update_place(place_id, request)
        uow.commit()
        events = _outcome_events(before, outcome, effective_context)
        view = (
            build_place_view(outcome.place, uow.repositories.places)
            if outcome.place is not None
            else None
        )

    log.info("Updated place %s: %s", place_id, outcome.status)
    _dispatch(events, effective_dispatcher, effective_context)
    if view is None:
        raise PlaceNotFoundError(place_id)
    return view


def destroy_place(
    place_id: int,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    dispatcher: NotificationDispatcher | None = None,
    context: CallerContext | None = None,
) -> OutcomeStatus:
    """Destroy a place; it survives as its demise class when it has one."""

    effective_context = _resolve_context(context)
    effective_dispatcher = _resolve_dispatcher(dispatcher)
    with _resolve_unit_of_work(unit_of_work_factory)() as uow:
        before = _snapshot_existing(uow, place_id)
        outcome = _engine(uow).destroy_place(place_id)
        uow.commit()
        events = _outcome_events(before, outcome, effective_context)

    _dispatch(events, effective_dispatcher, effective_context)
    return outcome.status


def create_place(
    place_class_code: str,
    direction: Direction,
    target_place_code: int,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    dispatcher: NotificationDispatcher | None = None,
    context: CallerContext | None = None,
) -> PlaceView:
    """Create a place ``direction`` of an existing one and link them both ways."""

    effective_context = _resolve_context(context)
    effective_dispatcher = _resolve_dispatcher(dispatcher)
    with _resolve_unit_of_work(unit_of_work_factory)() as uow:
        target_before = _snapshot_existing(uow, target_place_code)
        place = _engine(uow).create_place(place_class_code, direction, target_place_code)
        uow.commit()

        target_after = uow.repositories.places.get(target_place_code)
        if target_after is None:
            raise PlaceNotFoundError(target_place_code)
        events = diff_place_changes(
            target_before, snapshot_place(target_after), context=effective_context
        )
        view = build_place_view(place, uow.repositories.places)

    _dispatch(events, effective_dispatcher, effective_context)
    return view


def load_place_classes(
    place_classes: Iterable[PlaceClass],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> int:
    """Insert or refresh place classes; returns how many were written."""

    count = 0
    with _resolve_unit_of_work(unit_of_work_factory)() as uow:
        repository = uow.repositories.place_classes
        for place_class in place_classes:
            existing = repository.get(place_class.code)
            if existing is None:
                repository.add(place_class)
            else:
                existing.name = place_class.name
                existing.demised_place_class_code = place_class.demised_place_class_code
                for code, value in place_class.attributes.items():
                    existing.set_attribute(code, value)
            count += 1
        uow.commit()

    log.info("Loaded %s place classes", count)
    return count


def _resolve_unit_of_work(factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if factory is not None:
        return factory
    if not is_started():
        startup()
    return SqlAlchemyWorldUnitOfWork


def _resolve_context(context: CallerContext | None) -> CallerContext:
    return context if context is not None else get_caller_context()


def _engine(uow: WorldUnitOfWork) -> PlaceReconciliationEngine:
    return PlaceReconciliationEngine(
        places=uow.repositories.places,
        place_classes=uow.repositories.place_classes,
    )


def _snapshot_existing(uow: WorldUnitOfWork, place_id: int) -> PlaceSnapshot:
    place = uow.repositories.places.get(place_id)
    if place is None:
        raise PlaceNotFoundError(place_id)
    return snapshot_place(place)


def _outcome_events(
    before: PlaceSnapshot,
    outcome: ReconciliationOutcome,
    context: CallerContext,
) -> list[NotificationEvent]:
    if outcome.place is None:
        return place_destroyed_events(before, context=context)
    return diff_place_changes(before, snapshot_place(outcome.place), context=context)


def _resolve_dispatcher(dispatcher: NotificationDispatcher | None) -> NotificationDispatcher:
    if dispatcher is not None:
        return dispatcher
    try:
        return build_notification_dispatcher(get_notification_config())
    except ConfigurationError:
        log.exception("Notification configuration invalid; events will only be logged")
        return LoggingNotificationDispatcher()


def _dispatch(
    events: list[NotificationEvent],
    dispatcher: NotificationDispatcher,
    context: CallerContext,
) -> None:
    # Runs after commit; a delivery failure must not surface as a failed operation.
    if not events:
        return
    try:
        dispatcher.dispatch(events, context=context)
    except Exception:
        log.exception("Failed to dispatch %s notification events", len(events))
