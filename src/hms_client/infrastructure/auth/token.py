"""Client-side view of the bearer token.

The API signs tokens with a secret the client never sees, so claims are read
without verifying the signature. They are only used to know who we are and
when the session runs out; the server still authorizes every request.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

import jwt

from hms_client.application.exceptions import SessionError


@dataclass(frozen=True, slots=True)
class TokenClaims:
    subject_id: str | None
    expires_at: datetime | None

    def expired(self, now: datetime) -> bool:
        return self.expires_at is not None and now >= self.expires_at


def read_claims(token: str) -> TokenClaims:
    try:
        payload = jwt.decode(
            token,
            options={"verify_signature": False, "verify_exp": False},
            algorithms=["HS256", "RS256"],
        )
    except jwt.PyJWTError as exc:
        raise SessionError(f"Malformed token: {exc}") from exc

    subject = payload.get("id") or payload.get("sub")
    exp = payload.get("exp")
    expires_at = datetime.fromtimestamp(exp, tz=timezone.utc) if exp is not None else None
    return TokenClaims(
        subject_id=str(subject) if subject is not None else None,
        expires_at=expires_at,
    )
