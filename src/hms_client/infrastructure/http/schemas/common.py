from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """camelCase JSON on the wire, snake_case attributes in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def ref_id(value: Any) -> Any:
    """Reduce a populated document to its id."""
    if isinstance(value, dict):
        return value.get("_id") or value.get("id")
    return value
