from __future__ import annotations

from hms_client.domain.entities.notification import Notification, UnreadCounts
from hms_client.infrastructure.http.schemas.notification import (
    NotificationResponse,
    UnreadCountResponse,
)


def notification_to_entity(schema: NotificationResponse) -> Notification:
    return Notification(
        id=schema.id,
        type=schema.type,
        title=schema.title,
        message=schema.message,
        is_read=schema.is_read,
        link=schema.link,
        created_at=schema.created_at,
    )


def unread_counts_to_entity(schema: UnreadCountResponse) -> UnreadCounts:
    return UnreadCounts(
        message=max(0, schema.message_count or 0),
        notification=max(0, schema.notification_count or 0),
    )
