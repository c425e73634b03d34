from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from hms_client.infrastructure.http.schemas.common import ApiModel, ref_id


class CounterpartResponse(ApiModel):
    id: str = Field(alias="_id")
    first_name: str = ""
    last_name: str = ""
    role: str = ""
    email: str | None = None
    profile_image: str | None = None
    activity_status: str | None = None
    unread_count: int = 0
    last_message_time: int = 0


class MessageResponse(ApiModel):
    id: str = Field(alias="_id")
    sender: str
    receiver: str
    message: str
    read: bool = False
    created_at: datetime

    @field_validator("sender", "receiver", mode="before")
    @classmethod
    def _flatten(cls, value: object) -> object:
        return ref_id(value)


class SendMessageRequest(ApiModel):
    receiver_id: str
    message: str
