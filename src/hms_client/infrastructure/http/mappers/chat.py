from __future__ import annotations

from hms_client.domain.entities.counterpart import Counterpart
from hms_client.domain.entities.message import ChatMessage
from hms_client.domain.value_objects.enums import UserRole
from hms_client.infrastructure.http.schemas.chat import (
    CounterpartResponse,
    MessageResponse,
)


def counterpart_to_entity(schema: CounterpartResponse) -> Counterpart:
    role = UserRole(schema.role) if schema.role in set(UserRole) else schema.role
    return Counterpart(
        id=schema.id,
        first_name=schema.first_name,
        last_name=schema.last_name,
        role=role,
        email=schema.email,
        profile_image=schema.profile_image,
        activity_status=schema.activity_status,
        unread_count=max(0, schema.unread_count),
        last_message_time=schema.last_message_time,
    )


def message_to_entity(schema: MessageResponse) -> ChatMessage:
    return ChatMessage(
        id=schema.id,
        sender_id=schema.sender,
        receiver_id=schema.receiver,
        body=schema.message,
        read=schema.read,
        created_at=schema.created_at,
    )
