"""Notification transport adapters."""

from __future__ import annotations

from .dispatcher import (
    HttpNotificationDispatcher,
    LoggingNotificationDispatcher,
    build_notification_dispatcher,
)
from .schema import NotificationPayload

__all__ = [
    "HttpNotificationDispatcher",
    "LoggingNotificationDispatcher",
    "NotificationPayload",
    "build_notification_dispatcher",
]
