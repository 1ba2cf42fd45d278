"""Caller context taken from the environment."""

from __future__ import annotations

from mudworld.domain.notifications.context import CallerContext

from .env import optional_env_var


def get_caller_context() -> CallerContext:
    """Build the caller context; both values are optional."""

    return CallerContext(
        world_name=optional_env_var("MUDWORLD_WORLD_NAME"),
        auth_token=optional_env_var("MUDWORLD_AUTH_TOKEN"),
    )
