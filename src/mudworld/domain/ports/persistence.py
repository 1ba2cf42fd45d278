"""Ports for persisting domain aggregates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from mudworld.domain.model import Place, PlaceClass


@runtime_checkable
class Repository[TEntity, TKey](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def get(self, key: TKey) -> TEntity | None: ...

    def add(self, entity: TEntity) -> None: ...

    def list_all(self) -> Sequence[TEntity]: ...


@runtime_checkable
class PlaceRepository(Repository["Place", int], Protocol):
    """Persistence contract for places.

    ``add`` assigns ``Place.code`` when the place is new.
    """

    def remove(self, entity: Place) -> None: ...


@runtime_checkable
class PlaceClassRepository(Repository["PlaceClass", str], Protocol):
    """Persistence contract for place classes (reference data)."""
