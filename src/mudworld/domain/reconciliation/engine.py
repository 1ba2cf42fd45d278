"""Orchestrator for place reconciliation.

``update_place`` runs an ordered pipeline of steps. Each step may end the
pipeline early by returning an outcome:

1) sync attributes with the request
2) check health (may destroy the place and stop here)
3) change the place class when the request names another one
4) sync exits with the request

The engine never commits; the caller's unit of work does.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from mudworld.domain.errors import (
    ExitAlreadyExistsError,
    PlaceClassNotFoundError,
    PlaceNotFoundError,
)
from mudworld.domain.model import Place, opposed_direction

from .attributes import sync_attributes_with_class, sync_attributes_with_request
from .exits import sync_exits
from .health import evaluate_health

if TYPE_CHECKING:
    from mudworld.domain.model import Direction, PlaceClass
    from mudworld.domain.ports.persistence import PlaceClassRepository, PlaceRepository

    from .requests import PlaceRequest

log = getLogger(__name__)


class OutcomeStatus(StrEnum):
    UPDATED = "updated"
    DEMISED = "demised"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class ReconciliationOutcome:
    """Terminal state of a reconciliation call.

    ``place`` is ``None`` only when the place was deleted.
    """

    status: OutcomeStatus
    place: Place | None

    @property
    def destroyed(self) -> bool:
        return self.status is not OutcomeStatus.UPDATED


type UpdateStep = Callable[[Place, PlaceRequest], ReconciliationOutcome | None]


@dataclass(slots=True)
class PlaceReconciliationEngine:
    places: PlaceRepository
    place_classes: PlaceClassRepository

    def update_place(self, place_id: int, request: PlaceRequest) -> ReconciliationOutcome:
        """Bring the stored place in line with ``request``."""

        place = self._require_place(place_id)
        steps: tuple[UpdateStep, ...] = (
            self._sync_attributes_step,
            self._health_step,
            self._class_change_step,
            self._exits_step,
        )
        for step in steps:
            outcome = step(place, request)
            if outcome is not None:
                return outcome

        self.places.add(place)
        return ReconciliationOutcome(OutcomeStatus.UPDATED, place)

    def destroy_place(self, place_id: int) -> ReconciliationOutcome:
        """Destroy a place, turning it into its demise class when it has one."""

        place = self._require_place(place_id)
        demised_code = place.place_class.demised_place_class_code
        if demised_code is not None:
            self._change_class(place, demised_code)
            self.places.add(place)
            log.info("Place %s demised into class %s", place_id, demised_code)
            return ReconciliationOutcome(OutcomeStatus.DEMISED, place)

        self.places.remove(place)
        log.info("Place %s deleted", place_id)
        return ReconciliationOutcome(OutcomeStatus.DELETED, None)

    def create_place(
        self,
        place_class_code: str,
        direction: Direction,
        target_place_code: int,
    ) -> Place:
        """Create a place next to ``target_place_code``, linked both ways.

        Only the target place is checked for a conflicting exit; the new place
        has no exits yet.
        """

        place_class = self._require_class(place_class_code)
        target = self._require_place(target_place_code)
        opposite = opposed_direction(direction)
        if target.find_exit(opposite) is not None:
            raise ExitAlreadyExistsError(target.code, opposite)

        place = Place(place_class=place_class)
        self.places.add(place)
        if place.code is None:
            raise RuntimeError("place repository did not assign a code")

        sync_attributes_with_class(place, None, place_class)
        place.add_exit(direction, target_place_code)
        self.places.add(place)

        target.add_exit(opposite, place.code)
        self.places.add(target)
        log.info(
            "Created place %s (%s) %s of place %s",
            place.code,
            place_class.code,
            direction,
            target_place_code,
        )
        return place

    # Pipeline steps
    def _sync_attributes_step(
        self, place: Place, request: PlaceRequest
    ) -> ReconciliationOutcome | None:
        sync_attributes_with_request(place, request.attrs)
        return None

    def _health_step(self, place: Place, request: PlaceRequest) -> ReconciliationOutcome | None:
        if not evaluate_health(place, request.attrs):
            return None
        if place.code is None:
            raise RuntimeError("cannot destroy a place without a code")
        log.info("Place %s ran out of HP", place.code)
        return self.destroy_place(place.code)

    def _class_change_step(
        self, place: Place, request: PlaceRequest
    ) -> ReconciliationOutcome | None:
        if place.place_class.code != request.class_code:
            self._change_class(place, request.class_code)
        return None

    def _exits_step(self, place: Place, request: PlaceRequest) -> ReconciliationOutcome | None:
        sync_exits(place, request.exits)
        return None

    # Helpers
    def _change_class(self, place: Place, place_class_code: str) -> None:
        new_class = self._require_class(place_class_code)
        sync_attributes_with_class(place, place.place_class, new_class)
        place.place_class = new_class

    def _require_place(self, place_id: int) -> Place:
        place = self.places.get(place_id)
        if place is None:
            raise PlaceNotFoundError(place_id)
        return place

    def _require_class(self, place_class_code: str) -> PlaceClass:
        place_class = self.place_classes.get(place_class_code)
        if place_class is None:
            raise PlaceClassNotFoundError(place_class_code)
        return place_class
