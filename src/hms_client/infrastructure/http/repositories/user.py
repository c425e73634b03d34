from __future__ import annotations

import logging
from datetime import datetime

from hms_client.application.dto.session import SessionUser
from hms_client.application.exceptions import SessionError
from hms_client.infrastructure.auth.token import read_claims
from hms_client.infrastructure.http.repositories._base import ApiRepo
from hms_client.infrastructure.http.schemas.user import ProfileResponse

logger = logging.getLogger(__name__)


class ProfileReaderRepo(ApiRepo):
    async def profile(self) -> SessionUser:
        data = await self._request("GET", "/users/profile")
        schema = self._parse(ProfileResponse, data)
        return SessionUser(
            id=schema.id,
            role=schema.role,
            first_name=schema.first_name,
            last_name=schema.last_name,
            email=schema.email,
            token_expires_at=self._token_expiry(),
        )

    def _token_expiry(self) -> datetime | None:
        auth = self._client.headers.get("Authorization", "")
        if not auth.startswith("Bearer "):
            return None
        try:
            return read_claims(auth.removeprefix("Bearer ")).expires_at
        except SessionError:
            logger.debug("Bearer token is not a JWT; expiry unknown")
            return None
