"""JSON world file adapter."""

from __future__ import annotations

from .reader import read_place_classes, read_place_request
from .schema import ExitPayload, PlaceClassCatalogue, PlaceClassPayload, PlaceRequestPayload

__all__ = [
    "ExitPayload",
    "PlaceClassCatalogue",
    "PlaceClassPayload",
    "PlaceRequestPayload",
    "read_place_classes",
    "read_place_request",
]
