"""Requested place state (source-agnostic)."""

# switch off type warnings because of default_factory=dict
# pyright: reportUnknownVariableType=false

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mudworld.domain.model import Direction


@dataclass(slots=True)
class ExitRequest:
    """Desired state of one exit."""

    target_place_code: int
    visible: bool = True
    opened: bool = True
    locked: bool = False


@dataclass(slots=True)
class PlaceRequest:
    """Desired state of a place.

    ``exits=None`` means "leave exits alone"; an empty mapping removes them all.
    """

    class_code: str
    name: str | None = None
    attrs: dict[str, int] = field(default_factory=dict)
    exits: dict[Direction, ExitRequest] | None = None
