from __future__ import annotations

from typing import Protocol

from hms_client.domain.entities.counterpart import Counterpart
from hms_client.domain.entities.message import ChatMessage


class ChatReader(Protocol):
    async def list_counterparts(self) -> list[Counterpart]: ...

    async def list_messages(self, counterpart_id: str) -> list[ChatMessage]:
        """Full transcript with one counterpart, oldest first."""
        ...


class ChatWriter(Protocol):
    async def send(self, receiver_id: str, body: str) -> ChatMessage: ...

    async def mark_read(self, sender_id: str) -> None:
        """Read receipt for everything the counterpart sent us."""
        ...
