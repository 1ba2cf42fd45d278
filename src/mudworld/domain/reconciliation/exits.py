"""Merge a place's exits with requested exits."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from mudworld.domain.model import PlaceExit, same_exit

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mudworld.domain.model import Direction, Place

    from .requests import ExitRequest

log = getLogger(__name__)


def sync_exits(place: Place, requested: Mapping[Direction, ExitRequest] | None) -> None:
    """Replace the exits of ``place`` with the requested set.

    Exits already present for a direction are reused and only their flags
    change; the target of an existing exit is never reassigned here. Exits
    missing from ``requested`` are dropped. ``None`` leaves exits untouched.
    """

    if requested is None:
        return

    reconciled: list[PlaceExit] = []
    for direction, exit_request in requested.items():
        place_exit = place.find_exit(direction)
        if place_exit is None:
            place_exit = PlaceExit(
                direction=direction,
                target_place_code=exit_request.target_place_code,
            )
        place_exit.visible = exit_request.visible
        place_exit.opened = exit_request.opened
        place_exit.locked = exit_request.locked
        reconciled.append(place_exit)

    dropped = [
        e.direction for e in place.exits if not any(same_exit(e, kept) for kept in reconciled)
    ]
    if dropped:
        log.debug("Dropping exits %s from place %s", dropped, place.code)
    place.replace_exits(reconciled)
