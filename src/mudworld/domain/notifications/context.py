"""Ambient caller information passed explicitly to event producers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CallerContext:
    """Who is asking, and in which world.

    Both values are optional; a missing context is a normal state.
    """

    world_name: str | None = None
    auth_token: str | None = None


def world_name_of(context: CallerContext | None) -> str | None:
    return context.world_name if context is not None else None
