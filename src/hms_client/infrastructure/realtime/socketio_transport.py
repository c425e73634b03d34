"""Socket.IO implementation of the real-time transport port."""
from __future__ import annotations

import logging
from typing import Any

import socketio
from socketio import exceptions as sio_exceptions

from hms_client.application.exceptions import TransportError
from hms_client.application.ports.transport import ConnectHandler, EventHandler
from hms_client.application.subscription import Subscription
from hms_client.config import Settings

logger = logging.getLogger(__name__)


class SocketIOTransport:
    """Wraps one socketio.AsyncClient.

    Socket.IO keeps a single handler per event, so every event gets one
    dispatcher here that fans out to the registered handlers in order.
    Reconnection with exponential backoff is delegated to the client.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        client: socketio.AsyncClient | None = None,
    ) -> None:
        self._url = settings.realtime_url
        self._transports = list(settings.REALTIME_TRANSPORTS)
        self._sio = client or socketio.AsyncClient(
            reconnection=True,
            reconnection_attempts=settings.REALTIME_RECONNECT_ATTEMPTS,
            reconnection_delay=settings.REALTIME_RECONNECT_DELAY,
            reconnection_delay_max=settings.REALTIME_RECONNECT_DELAY_MAX,
            randomization_factor=settings.REALTIME_RECONNECT_JITTER,
        )
        self._handlers: dict[str, list[EventHandler]] = {}
        self._connect_handlers: list[ConnectHandler] = []
        self._sio.on("connect", self._on_connect)
        self._sio.on("disconnect", self._on_disconnect)

    @property
    def connected(self) -> bool:
        return bool(self._sio.connected)

    async def connect(self) -> None:
        try:
            await self._sio.connect(self._url, transports=self._transports)
        except sio_exceptions.ConnectionError as exc:
            raise TransportError(f"Real-time connection failed: {exc}") from exc
        logger.info("Real-time channel connected to %s", self._url)

    async def close(self) -> None:
        # also aborts a reconnect loop in progress
        await self._sio.shutdown()
        logger.info("Real-time channel closed")

    async def emit(self, event: str, data: Any = None) -> None:
        try:
            await self._sio.emit(event, data)
        except sio_exceptions.BadNamespaceError as exc:
            raise TransportError(f"Cannot emit {event}: not connected") from exc

    def on(self, event: str, handler: EventHandler) -> Subscription:
        handlers = self._handlers.get(event)
        if handlers is None:
            handlers = self._handlers[event] = []
            self._sio.on(event, self._dispatcher(event))
        handlers.append(handler)

        def _release() -> None:
            if handler in handlers:
                handlers.remove(handler)

        return Subscription(_release)

    def on_connect(self, handler: ConnectHandler) -> Subscription:
        self._connect_handlers.append(handler)

        def _release() -> None:
            if handler in self._connect_handlers:
                self._connect_handlers.remove(handler)

        return Subscription(_release)

    def _dispatcher(self, event: str):
        async def _dispatch(*args: Any) -> None:
            data = args[0] if args else None
            for handler in list(self._handlers.get(event, [])):
                try:
                    await handler(data)
                except Exception:
                    logger.exception("Error handling real-time event %s", event)

        return _dispatch

    async def _on_connect(self) -> None:
        for handler in list(self._connect_handlers):
            try:
                await handler()
            except Exception:
                logger.exception("Error in real-time connect handler")

    async def _on_disconnect(self, *_args: Any) -> None:
        logger.warning("Real-time channel disconnected")
