from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class ChatMessage:
    id: str
    sender_id: str
    receiver_id: str
    body: str
    read: bool
    created_at: datetime
