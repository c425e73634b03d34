from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from hms_client.domain.value_objects.enums import NotificationType
from hms_client.infrastructure.http.schemas.common import ApiModel


class NotificationResponse(ApiModel):
    id: str = Field(alias="_id")
    type: NotificationType = NotificationType.GENERAL
    title: str = ""
    message: str = ""
    is_read: bool = False
    link: str = ""
    created_at: datetime

    @field_validator("type", mode="before")
    @classmethod
    def _unknown_type_is_general(cls, value: object) -> object:
        if value not in set(NotificationType):
            return NotificationType.GENERAL
        return value


class UnreadCountResponse(ApiModel):
    message_count: int | None = 0
    notification_count: int | None = 0
