from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from hms_client.domain.value_objects.enums import NotificationType


@dataclass(frozen=True, slots=True)
class Notification:
    id: str
    type: NotificationType
    title: str
    message: str
    is_read: bool
    link: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class UnreadCounts:
    """Server-reported unread tallies."""

    message: int = 0
    notification: int = 0
