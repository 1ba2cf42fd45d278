"""Read place classes and place requests from JSON files."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .schema import PlaceClassCatalogue, PlaceRequestPayload

if TYPE_CHECKING:
    from pathlib import Path

    from mudworld.domain.model import PlaceClass
    from mudworld.domain.reconciliation.requests import PlaceRequest

log = getLogger(__name__)


def read_place_classes(path: Path) -> list[PlaceClass]:
    catalogue = PlaceClassCatalogue.model_validate_json(path.read_bytes())
    log.debug("Read %d place classes from %s", len(catalogue.place_classes), path)
    return [payload.to_domain() for payload in catalogue.place_classes]


def read_place_request(path: Path) -> PlaceRequest:
    payload = PlaceRequestPayload.model_validate_json(path.read_bytes())
    return payload.to_request()
