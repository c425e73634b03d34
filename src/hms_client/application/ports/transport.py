from __future__ import annotations

from typing import Any, Awaitable, Callable, Protocol

from hms_client.application.subscription import Subscription

EventHandler = Callable[[Any], Awaitable[None]]
ConnectHandler = Callable[[], Awaitable[None]]


class RealtimeTransport(Protocol):
    """One bidirectional connection to the real-time server."""

    @property
    def connected(self) -> bool: ...

    async def connect(self) -> None: ...
    async def close(self) -> None: ...
    async def emit(self, event: str, data: Any = None) -> None: ...

    def on(self, event: str, handler: EventHandler) -> Subscription: ...

    def on_connect(self, handler: ConnectHandler) -> Subscription:
        """Run after the first connect and every reconnect."""
        ...


class EventSource(Protocol):
    """Anything that hands out subscriptions to real-time events."""

    def subscribe(self, event: str, handler: EventHandler) -> Subscription: ...
