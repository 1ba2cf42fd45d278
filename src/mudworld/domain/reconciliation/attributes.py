"""Merge a place's attributes with a place class or a request.

Attributes that survive keep their object identity; only their value changes.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mudworld.domain.model import Place, PlaceClass

log = getLogger(__name__)


def sync_attributes_with_class(
    place: Place,
    previous_class: PlaceClass | None,
    new_class: PlaceClass,
) -> None:
    """Align ``place`` attributes with ``new_class`` defaults.

    Codes that only ``previous_class`` defines are dropped. Without a previous
    class (first assignment) nothing is dropped.
    """

    new_defaults = new_class.attributes
    if previous_class is not None:
        previous_codes = previous_class.attributes.keys()
        for attr in place.attrs:
            if attr.code in previous_codes and attr.code not in new_defaults:
                place.remove_attr(attr)

    _upsert(place, new_defaults)
    log.debug("Synced place %s attributes with class %s", place.code, new_class.code)


def sync_attributes_with_request(place: Place, requested: Mapping[str, int]) -> None:
    """Make ``place`` attributes match ``requested`` exactly."""

    for attr in place.attrs:
        if attr.code not in requested:
            place.remove_attr(attr)

    _upsert(place, requested)


def _upsert(place: Place, values: Mapping[str, int]) -> None:
    for code, value in values.items():
        attr = place.find_attr(code)
        if attr is None:
            place.add_attr(code, value)
        else:
            attr.value = value
