from __future__ import annotations

from hms_client.domain.entities.notification import Notification, UnreadCounts
from hms_client.infrastructure.http.mappers.notification import (
    notification_to_entity,
    unread_counts_to_entity,
)
from hms_client.infrastructure.http.repositories._base import ApiRepo
from hms_client.infrastructure.http.schemas.notification import (
    NotificationResponse,
    UnreadCountResponse,
)


class NotificationReaderRepo(ApiRepo):
    async def list_notifications(self) -> list[Notification]:
        data = await self._request("GET", "/notifications")
        return [notification_to_entity(s) for s in self._parse_list(NotificationResponse, data)]

    async def unread_counts(self) -> UnreadCounts:
        data = await self._request("GET", "/notifications/unread-count")
        return unread_counts_to_entity(self._parse(UnreadCountResponse, data or {}))


class NotificationWriterRepo(ApiRepo):
    async def mark_read(self, notification_id: str) -> None:
        await self._request("PUT", f"/notifications/{notification_id}/read")

    async def mark_all_read(self) -> None:
        await self._request("PUT", "/notifications/read-all")

    async def delete(self, notification_id: str) -> None:
        await self._request("DELETE", f"/notifications/{notification_id}")

    async def clear(self) -> None:
        await self._request("DELETE", "/notifications")
