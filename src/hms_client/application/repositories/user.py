from __future__ import annotations

from typing import Protocol

from hms_client.application.dto.session import SessionUser


class ProfileReader(Protocol):
    async def profile(self) -> SessionUser: ...
