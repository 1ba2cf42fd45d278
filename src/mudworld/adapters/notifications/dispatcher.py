"""Notification dispatchers: HTTP topic publisher and log-only fallback."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from mudworld.adapters.http_resilience import ResilientClient

from .schema import NotificationPayload

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from mudworld.config.http_resilience import ResilienceConfig
    from mudworld.config.notifications import NotificationConfig
    from mudworld.domain.model import NotificationEvent
    from mudworld.domain.notifications.context import CallerContext
    from mudworld.domain.ports.notifications import NotificationDispatcher

log = getLogger(__name__)


def _log_event(event: NotificationEvent) -> None:
    log.info("world: %s, entityId: %s, event: %s", event.world_name, event.entity_id, event.event_kind)


class LoggingNotificationDispatcher:
    """Dispatcher used while the place topic is disabled."""

    def send(self, event: NotificationEvent, *, context: CallerContext | None = None) -> None:
        del context
        _log_event(event)

    def dispatch(
        self,
        events: Iterable[NotificationEvent],
        *,
        context: CallerContext | None = None,
    ) -> None:
        del context
        for event in events:
            _log_event(event)


class HttpNotificationDispatcher:
    """POSTs each event as JSON to the configured place topic."""

    def __init__(
        self,
        *,
        config: NotificationConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        if config.topic_url is None:
            raise ValueError("HttpNotificationDispatcher requires a topic URL")
        self._config = config
        self._topic_url = config.topic_url
        self._client_factory = client_factory or ResilientClient

    def send(self, event: NotificationEvent, *, context: CallerContext | None = None) -> None:
        self.dispatch((event,), context=context)

    def dispatch(
        self,
        events: Iterable[NotificationEvent],
        *,
        context: CallerContext | None = None,
    ) -> None:
        """Send events in order over a single client."""

        batch = tuple(events)
        if not batch:
            return
        asyncio.run(self._dispatch_async(batch, context=context))

    async def _dispatch_async(
        self,
        events: tuple[NotificationEvent, ...],
        *,
        context: CallerContext | None,
    ) -> None:
        headers = self._headers(context)
        async with self._client_factory(self._config.resilience) as client:
            for event in events:
                await self._post(client, event, headers)

    async def _post(
        self,
        client: ResilientClient,
        event: NotificationEvent,
        headers: dict[str, str],
    ) -> None:
        _log_event(event)
        payload = NotificationPayload.from_event(event)
        try:
            response = await client.post(self._topic_url, json=payload.to_wire(), headers=headers)
            response.raise_for_status()
        except httpx.HTTPError:
            log.exception(
                "Failed to publish %s for %s %s", event.event_kind, event.entity_type, event.entity_id
            )

    def _headers(self, context: CallerContext | None) -> dict[str, str]:
        if context is None or context.auth_token is None:
            return {}
        return {self._config.auth_token_header: context.auth_token}


def build_notification_dispatcher(config: NotificationConfig) -> NotificationDispatcher:
    if not config.enabled:
        log.info("Place topic disabled; notifications will only be logged")
        return LoggingNotificationDispatcher()
    return HttpNotificationDispatcher(config=config)


if TYPE_CHECKING:
    from mudworld.config.notifications import NotificationConfig as _Config

    _logging_check: NotificationDispatcher = LoggingNotificationDispatcher()
    _http_check: NotificationDispatcher = HttpNotificationDispatcher(config=_Config())
