"""Port for transporting notification events."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mudworld.domain.model import NotificationEvent
    from mudworld.domain.notifications.context import CallerContext


@runtime_checkable
class NotificationDispatcher(Protocol):
    """Sends events somewhere interested parties can pick them up.

    Implementations must not raise on transport failures. ``dispatch`` sends
    one operation's events in order and may share a connection between them.
    """

    def send(self, event: NotificationEvent, *, context: CallerContext | None = None) -> None: ...

    def dispatch(
        self,
        events: Iterable[NotificationEvent],
        *,
        context: CallerContext | None = None,
    ) -> None: ...
