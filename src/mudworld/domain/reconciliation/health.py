"""Health rules deciding whether a place is destroyed."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from mudworld.domain.model import PLACE_HP_ATTR, PLACE_MAX_HP_ATTR

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mudworld.domain.model import Place

log = getLogger(__name__)


def evaluate_health(place: Place, requested_attrs: Mapping[str, int]) -> bool:
    """Return whether ``place`` has to be destroyed.

    A place without a ``MAXHP`` attribute (or with ``MAXHP == 0``) can not be
    destroyed. The requested ``HP`` counts as 0 when absent. An ``HP`` above
    ``MAXHP`` is clamped on the stored attribute and never destroys.
    """

    max_attr = place.find_attr(PLACE_MAX_HP_ATTR)
    max_hp = max_attr.value if max_attr is not None else 0
    current_hp = requested_attrs.get(PLACE_HP_ATTR, 0)

    if max_hp == 0:
        return False

    if current_hp > max_hp:
        hp_attr = place.find_attr(PLACE_HP_ATTR)
        if hp_attr is not None:
            hp_attr.value = max_hp
            log.debug("Clamped HP of place %s to %s", place.code, max_hp)
        return False

    return current_hp <= 0
