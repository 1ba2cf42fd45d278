"""SQLAlchemy adapter package for the world store."""

from __future__ import annotations

from .mappings import mapper_registry, start_mappers
from .repositories import SqlAlchemyPlaceClassRepository, SqlAlchemyPlaceRepository
from .unit_of_work import (
    SqlAlchemyWorldUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyPlaceClassRepository",
    "SqlAlchemyPlaceRepository",
    "SqlAlchemyWorldUnitOfWork",
    "StartupError",
    "is_started",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
