"""Domain port definitions for adapters."""

from __future__ import annotations

from .notifications import NotificationDispatcher
from .persistence import PlaceClassRepository, PlaceRepository, Repository
from .unit_of_work import (
    RepositoryCollection,
    UnitOfWork,
    WorldRepositories,
    WorldUnitOfWork,
)

__all__ = [
    "NotificationDispatcher",
    "PlaceClassRepository",
    "PlaceRepository",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
    "WorldRepositories",
    "WorldUnitOfWork",
]
