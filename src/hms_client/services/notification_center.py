from __future__ import annotations

import dataclasses
import logging
from datetime import datetime

from hms_client.application.exceptions import AppError
from hms_client.application.gateway import HospitalGateway
from hms_client.application.ports.clock import Clock, SystemClock
from hms_client.application.ports.toast import Toaster
from hms_client.domain.entities.notification import Notification
from hms_client.domain.value_objects.enums import CounterKind, NotificationFilter
from hms_client.services._observable import Observable
from hms_client.services.unread_counters import UnreadCounters

logger = logging.getLogger(__name__)


def time_ago(ts: datetime, now: datetime) -> str:
    seconds = int((now - ts).total_seconds())
    if seconds < 60:
        return "just now"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    days = hours // 24
    if days < 7:
        return f"{days}d ago"
    return ts.date().isoformat()


class NotificationCenter(Observable):
    """Read-through cache of the user's notifications."""

    def __init__(
        self,
        gateway: HospitalGateway,
        counters: UnreadCounters,
        toaster: Toaster,
        clock: Clock | None = None,
    ) -> None:
        super().__init__()
        self._gateway = gateway
        self._counters = counters
        self._toaster = toaster
        self._clock = clock or SystemClock()
        self._items: list[Notification] = []

    @property
    def items(self) -> list[Notification]:
        return list(self._items)

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self._items if not n.is_read)

    def filtered(self, which: NotificationFilter | str = NotificationFilter.ALL) -> list[Notification]:
        which = NotificationFilter(which)
        if which == NotificationFilter.UNREAD:
            return [n for n in self._items if not n.is_read]
        if which == NotificationFilter.READ:
            return [n for n in self._items if n.is_read]
        return self.items

    def age(self, notification: Notification) -> str:
        return time_ago(notification.created_at, self._clock.now())

    async def load(self) -> bool:
        try:
            self._items = await self._gateway.notifications.list_notifications()
        except AppError as exc:
            logger.warning("Error fetching notifications: %s", exc.detail)
            self._toaster.error("Failed to load notifications")
            return False
        self._notify()
        return True

    async def mark_read(self, notification_id: str) -> bool:
        was_unread = self._is_unread(notification_id)
        try:
            await self._gateway.notifications_w.mark_read(notification_id)
        except AppError as exc:
            logger.warning("Error marking notification %s read: %s", notification_id, exc.detail)
            self._toaster.error("Failed to update")
            return False

        self._items = [
            dataclasses.replace(n, is_read=True) if n.id == notification_id else n
            for n in self._items
        ]
        if was_unread:
            self._counters.decrement(CounterKind.NOTIFICATION)
        self._notify()
        return True

    async def mark_all_read(self) -> bool:
        try:
            await self._gateway.notifications_w.mark_all_read()
        except AppError as exc:
            logger.warning("Error marking all notifications read: %s", exc.detail)
            self._toaster.error("Failed to update")
            return False

        self._items = [dataclasses.replace(n, is_read=True) for n in self._items]
        self._counters.reset(CounterKind.NOTIFICATION)
        self._toaster.success("All marked as read")
        self._notify()
        return True

    async def delete(self, notification_id: str) -> bool:
        was_unread = self._is_unread(notification_id)
        try:
            await self._gateway.notifications_w.delete(notification_id)
        except AppError as exc:
            logger.warning("Error deleting notification %s: %s", notification_id, exc.detail)
            self._toaster.error("Failed to delete")
            return False

        self._items = [n for n in self._items if n.id != notification_id]
        if was_unread:
            self._counters.decrement(CounterKind.NOTIFICATION)
        self._notify()
        return True

    async def clear_all(self) -> bool:
        try:
            await self._gateway.notifications_w.clear()
        except AppError as exc:
            logger.warning("Error clearing notifications: %s", exc.detail)
            self._toaster.error("Failed to clear")
            return False

        self._items = []
        self._counters.reset(CounterKind.NOTIFICATION)
        self._toaster.success("All notifications cleared")
        self._notify()
        return True

    def _is_unread(self, notification_id: str) -> bool:
        return any(n.id == notification_id and not n.is_read for n in self._items)
