from __future__ import annotations

from typing import Protocol

from hms_client.domain.entities.notification import Notification, UnreadCounts


class NotificationReader(Protocol):
    async def list_notifications(self) -> list[Notification]: ...
    async def unread_counts(self) -> UnreadCounts: ...


class NotificationWriter(Protocol):
    async def mark_read(self, notification_id: str) -> None: ...
    async def mark_all_read(self) -> None: ...
    async def delete(self, notification_id: str) -> None: ...
    async def clear(self) -> None: ...
