from __future__ import annotations

from dataclasses import dataclass

from hms_client.domain.value_objects.enums import UserRole


@dataclass(frozen=True, slots=True)
class Counterpart:
    id: str
    first_name: str
    last_name: str
    role: UserRole | str
    email: str | None = None
    profile_image: str | None = None
    activity_status: str | None = None
    unread_count: int = 0
    last_message_time: int = 0

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def initials(self) -> str:
        return f"{self.first_name[:1]}{self.last_name[:1]}"
