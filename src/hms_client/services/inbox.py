"""Conversation list and open-conversation transcript."""
from __future__ import annotations

import dataclasses
import logging
from collections import deque
from enum import StrEnum

from hms_client.application.dto.session import SessionUser
from hms_client.application.exceptions import AppError, ValidationError
from hms_client.application.gateway import HospitalGateway
from hms_client.application.ports.toast import Toaster
from hms_client.domain.entities.counterpart import Counterpart
from hms_client.domain.entities.message import ChatMessage
from hms_client.services._observable import Observable
from hms_client.services.unread_counters import UnreadCounters

logger = logging.getLogger(__name__)

_SEEN_LIMIT = 2000


class Delivery(StrEnum):
    """What an inbound message did to the inbox."""

    DUPLICATE = "duplicate"
    OWN = "own"
    OPEN = "open"
    UNREAD = "unread"


def badge(count: int) -> str:
    if count <= 0:
        return ""
    return "9+" if count > 9 else str(count)


def _merge(history: list[ChatMessage], live: list[ChatMessage]) -> list[ChatMessage]:
    """Fetched history plus messages that arrived while it loaded, oldest first."""
    known = {m.id for m in history}
    merged = list(history) + [m for m in live if m.id not in known]
    return sorted(merged, key=lambda m: m.created_at)


class Inbox(Observable):
    """Counterparts ordered most-recently-active first.

    Per-counterpart unread counts live here and are updated independently
    of the global message counter; only reconciling fetches bring the two
    back in line.
    """

    def __init__(
        self,
        gateway: HospitalGateway,
        counters: UnreadCounters,
        user: SessionUser,
        toaster: Toaster,
    ) -> None:
        super().__init__()
        self._gateway = gateway
        self._counters = counters
        self._user = user
        self._toaster = toaster
        self._counterparts: list[Counterpart] = []
        self._open_id: str | None = None
        self._transcript: list[ChatMessage] = []
        self._seen: set[str] = set()
        self._seen_order: deque[str] = deque()

    @property
    def counterparts(self) -> list[Counterpart]:
        return list(self._counterparts)

    @property
    def open_id(self) -> str | None:
        return self._open_id

    @property
    def transcript(self) -> list[ChatMessage]:
        return list(self._transcript)

    def get(self, counterpart_id: str) -> Counterpart | None:
        for c in self._counterparts:
            if c.id == counterpart_id:
                return c
        return None

    def is_open(self, counterpart_id: str) -> bool:
        return self._open_id is not None and self._open_id == counterpart_id

    def filter(self, term: str) -> list[Counterpart]:
        needle = term.strip().lower()
        if not needle:
            return self.counterparts
        return [
            c for c in self._counterparts
            if needle in c.first_name.lower() or needle in c.last_name.lower()
        ]

    async def load(self) -> bool:
        try:
            self._counterparts = await self._gateway.chat.list_counterparts()
        except AppError as exc:
            logger.warning("Error fetching chat users: %s", exc.detail)
            self._toaster.error("Failed to load conversations")
            return False
        self._notify()
        return True

    async def open(self, counterpart_id: str) -> bool:
        """Open a conversation: zero its badge, load the transcript, send a read receipt."""
        self._open_id = counterpart_id
        self._transcript = []
        self._set_unread(counterpart_id, 0)
        self._notify()

        try:
            messages = await self._gateway.chat.list_messages(counterpart_id)
        except AppError as exc:
            logger.warning("Error fetching messages with %s: %s", counterpart_id, exc.detail)
            self._toaster.error("Failed to load messages")
            return False

        if self._open_id != counterpart_id:
            logger.debug("Conversation %s closed before its transcript arrived", counterpart_id)
            return False

        for m in messages:
            self._remember(m.id)
        self._transcript = _merge(messages, self._transcript)
        self._notify()
        await self._read_receipt(counterpart_id)
        return True

    def close(self) -> None:
        self._open_id = None
        self._transcript = []
        self._notify()

    async def send(self, body: str) -> ChatMessage | None:
        if self._open_id is None:
            raise ValidationError("No conversation is open")
        if not body.strip():
            raise ValidationError("Message is empty")

        receiver_id = self._open_id
        try:
            message = await self._gateway.chat_w.send(receiver_id, body)
        except AppError as exc:
            logger.warning("Error sending message to %s: %s", receiver_id, exc.detail)
            self._toaster.error("Failed to send message")
            return None

        if self._remember(message.id) and self.is_open(receiver_id):
            self._transcript.append(message)
        self._move_to_front(receiver_id)
        self._notify()
        return message

    async def receive(self, message: ChatMessage) -> Delivery:
        """Apply one inbound real-time message."""
        if not self._remember(message.id):
            logger.debug("Dropping duplicate delivery of message %s", message.id)
            return Delivery.DUPLICATE

        if message.sender_id == self._user.id:
            peer = message.receiver_id
            if self.is_open(peer):
                self._transcript.append(message)
            self._move_to_front(peer)
            self._notify()
            return Delivery.OWN

        peer = message.sender_id
        if self.is_open(peer):
            self._transcript.append(message)
            self._move_to_front(peer, unread_count=0)
            self._notify()
            await self._read_receipt(peer)
            return Delivery.OPEN

        current = self.get(peer)
        if current is not None:
            self._move_to_front(peer, unread_count=current.unread_count + 1)
        self._notify()
        return Delivery.UNREAD

    async def _read_receipt(self, counterpart_id: str) -> None:
        try:
            await self._gateway.chat_w.mark_read(counterpart_id)
        except AppError as exc:
            logger.warning("Error marking messages from %s read: %s", counterpart_id, exc.detail)
            return
        await self._counters.fetch_unread_count()

    def _remember(self, message_id: str) -> bool:
        if message_id in self._seen:
            return False
        self._seen.add(message_id)
        self._seen_order.append(message_id)
        if len(self._seen_order) > _SEEN_LIMIT:
            self._seen.discard(self._seen_order.popleft())
        return True

    def _set_unread(self, counterpart_id: str, value: int) -> None:
        self._counterparts = [
            dataclasses.replace(c, unread_count=value) if c.id == counterpart_id else c
            for c in self._counterparts
        ]

    def _move_to_front(self, counterpart_id: str, **changes: int) -> None:
        for index, c in enumerate(self._counterparts):
            if c.id == counterpart_id:
                moved = dataclasses.replace(c, **changes) if changes else c
                del self._counterparts[index]
                self._counterparts.insert(0, moved)
                return
