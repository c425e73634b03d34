"""Per-login real-time session: one transport, one set of counters, one inbox."""
from __future__ import annotations

import asyncio
import logging
from types import TracebackType
from typing import Any, Self

from hms_client.application.dto.session import SessionUser
from hms_client.application.exceptions import SessionError, ValidationError
from hms_client.application.gateway import HospitalGateway
from hms_client.application.ports.clock import Clock, SystemClock
from hms_client.application.ports.toast import LoggingToaster, Toaster
from hms_client.application.ports.transport import EventHandler, RealtimeTransport
from hms_client.application.subscription import Subscription, SubscriptionSet
from hms_client.domain.value_objects.enums import CounterKind, RealtimeEvent
from hms_client.infrastructure.realtime.events import decode_message
from hms_client.services.inbox import Delivery, Inbox
from hms_client.services.unread_counters import UnreadCounters

logger = logging.getLogger(__name__)


class RealtimeSession:
    """Owns exactly one transport for the lifetime of a logged-in user.

    Every (re)connect re-joins the user's room and reconciles the unread
    counters. Ending the session releases all subscriptions handed out
    through it before the connection is closed.
    """

    def __init__(
        self,
        gateway: HospitalGateway,
        transport: RealtimeTransport,
        user: SessionUser,
        *,
        toaster: Toaster | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._gateway = gateway
        self._transport = transport
        self._user = user
        self._clock = clock or SystemClock()
        self.toaster = toaster or LoggingToaster()
        self.counters = UnreadCounters(gateway.notifications.unread_counts)
        self.inbox = Inbox(gateway, self.counters, user, self.toaster)
        self._subscriptions = SubscriptionSet()
        self._expiry_task: asyncio.Task[None] | None = None
        self._started = False

    @property
    def user(self) -> SessionUser:
        return self._user

    @property
    def active(self) -> bool:
        return self._started

    async def start(self) -> None:
        if self._started:
            raise SessionError("Session already started")
        expires_in = self._seconds_left()
        if expires_in is not None and expires_in <= 0:
            raise SessionError("Session token has expired")

        self._subscriptions.add(self._transport.on_connect(self._announce))
        self.subscribe(RealtimeEvent.RECEIVE_MESSAGE, self._on_receive_message)
        self.subscribe(RealtimeEvent.NEW_NOTIFICATION, self._on_new_notification)
        try:
            await self._transport.connect()
        except Exception:
            self._subscriptions.release_all()
            raise

        self._started = True
        if expires_in is not None:
            self._expiry_task = asyncio.create_task(
                self._expire_after(expires_in), name=f"session-expiry-{self._user.id}",
            )
        logger.info("Real-time session started for user %s", self._user.id)

    async def end(self) -> None:
        if not self._started:
            return
        self._started = False
        if self._expiry_task is not None and self._expiry_task is not asyncio.current_task():
            self._expiry_task.cancel()
        self._expiry_task = None
        self._subscriptions.release_all()
        await self._transport.close()
        logger.info("Real-time session ended for user %s", self._user.id)

    def subscribe(self, event: str, handler: EventHandler) -> Subscription:
        """Register a handler that is released when the session ends."""
        return self._subscriptions.add(self._transport.on(event, handler))

    async def _announce(self) -> None:
        await self._transport.emit(RealtimeEvent.JOIN_ROOM, self._user.room)
        await self.counters.fetch_unread_count()

    async def _on_receive_message(self, data: Any) -> None:
        try:
            message = decode_message(data)
        except ValidationError as exc:
            logger.warning("%s", exc.detail)
            return
        delivery = await self.inbox.receive(message)
        if delivery == Delivery.UNREAD:
            self.counters.increment(CounterKind.MESSAGE)

    async def _on_new_notification(self, _data: Any) -> None:
        self.counters.increment(CounterKind.NOTIFICATION)

    def _seconds_left(self) -> float | None:
        if self._user.token_expires_at is None:
            return None
        return (self._user.token_expires_at - self._clock.now()).total_seconds()

    async def _expire_after(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
        logger.info("Session token for user %s expired", self._user.id)
        await self.end()

    async def __aenter__(self) -> Self:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.end()
