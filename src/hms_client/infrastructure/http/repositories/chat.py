from __future__ import annotations

import time

from hms_client.domain.entities.counterpart import Counterpart
from hms_client.domain.entities.message import ChatMessage
from hms_client.infrastructure.http.mappers.chat import (
    counterpart_to_entity,
    message_to_entity,
)
from hms_client.infrastructure.http.repositories._base import ApiRepo
from hms_client.infrastructure.http.schemas.chat import (
    CounterpartResponse,
    MessageResponse,
    SendMessageRequest,
)


class ChatReaderRepo(ApiRepo):
    async def list_counterparts(self) -> list[Counterpart]:
        # cache-buster
        data = await self._request("GET", "/chat/users", params={"t": int(time.time() * 1000)})
        return [counterpart_to_entity(s) for s in self._parse_list(CounterpartResponse, data)]

    async def list_messages(self, counterpart_id: str) -> list[ChatMessage]:
        data = await self._request("GET", f"/chat/{counterpart_id}")
        return [message_to_entity(s) for s in self._parse_list(MessageResponse, data)]


class ChatWriterRepo(ApiRepo):
    async def send(self, receiver_id: str, body: str) -> ChatMessage:
        payload = SendMessageRequest(receiver_id=receiver_id, message=body)
        data = await self._request("POST", "/chat/send", json=payload.model_dump(by_alias=True))
        return message_to_entity(self._parse(MessageResponse, data))

    async def mark_read(self, sender_id: str) -> None:
        await self._request("PUT", f"/chat/read/{sender_id}")
