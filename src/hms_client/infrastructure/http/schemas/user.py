from __future__ import annotations

from pydantic import Field

from hms_client.domain.value_objects.enums import UserRole
from hms_client.infrastructure.http.schemas.common import ApiModel


class ProfileResponse(ApiModel):
    id: str = Field(alias="_id")
    role: UserRole
    first_name: str = ""
    last_name: str = ""
    email: str = ""
