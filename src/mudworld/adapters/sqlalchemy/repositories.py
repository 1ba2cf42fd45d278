"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import select

from mudworld.adapters.sqlalchemy.mappings import place_class_table, place_table
from mudworld.domain.model import Place, PlaceClass

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.orm import Session


class SqlAlchemyPlaceRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, key: int) -> Place | None:
        return self.session.get(Place, key)

    def add(self, entity: Place) -> None:
        self.session.add(entity)
        # flush so new places get their autoincrement code right away
        self.session.flush()

    def remove(self, entity: Place) -> None:
        self.session.delete(entity)
        self.session.flush()

    def list_all(self) -> Sequence[Place]:
        stmt = select(Place).order_by(place_table.c.code)
        return self.session.execute(stmt).scalars().all()


class SqlAlchemyPlaceClassRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, key: str) -> PlaceClass | None:
        return self.session.get(PlaceClass, key)

    def add(self, entity: PlaceClass) -> None:
        self.session.add(entity)

    def list_all(self) -> Sequence[PlaceClass]:
        stmt = select(PlaceClass).order_by(place_class_table.c.code)
        return self.session.execute(stmt).scalars().all()


if TYPE_CHECKING:
    from mudworld.domain.ports.persistence import PlaceClassRepository, PlaceRepository

    _session_stub = cast("Session", object())
    _place_repo: PlaceRepository = SqlAlchemyPlaceRepository(_session_stub)
    _place_class_repo: PlaceClassRepository = SqlAlchemyPlaceClassRepository(_session_stub)
