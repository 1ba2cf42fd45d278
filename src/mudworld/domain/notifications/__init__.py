"""Change-event derivation for places."""

from __future__ import annotations

from .context import CallerContext, world_name_of
from .differ import diff_place_changes, place_destroyed_events

__all__ = [
    "CallerContext",
    "diff_place_changes",
    "place_destroyed_events",
    "world_name_of",
]
