from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from hms_client.domain.value_objects.enums import UserRole


@dataclass(frozen=True, slots=True)
class SessionUser:
    """Logged-in identity as returned by the profile endpoint."""

    id: str
    role: UserRole
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    token_expires_at: datetime | None = None

    @property
    def is_patient(self) -> bool:
        return self.role == UserRole.PATIENT

    @property
    def room(self) -> str:
        """Per-user channel joined on the real-time server."""
        return self.id
