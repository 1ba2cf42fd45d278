"""Reconciliation of stored places against classes and requests.

Layered flow:
1) attribute sync (class- or request-driven)
2) health evaluation (clamp or destroy)
3) class change / demise
4) exit sync
"""

from __future__ import annotations

from .attributes import sync_attributes_with_class, sync_attributes_with_request
from .engine import OutcomeStatus, PlaceReconciliationEngine, ReconciliationOutcome
from .exits import sync_exits
from .health import evaluate_health
from .requests import ExitRequest, PlaceRequest

__all__ = [
    "ExitRequest",
    "OutcomeStatus",
    "PlaceReconciliationEngine",
    "PlaceRequest",
    "ReconciliationOutcome",
    "evaluate_health",
    "sync_attributes_with_class",
    "sync_attributes_with_request",
    "sync_exits",
]
