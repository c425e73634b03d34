from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hms_client.application.exceptions import ServerError, TransportError
from hms_client.infrastructure.http.errors import raise_for_api_error

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ApiRepo:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TransportError as exc:
            logger.debug("%s %s unreachable", method, url, exc_info=True)
            raise TransportError(str(exc) or exc.__class__.__name__) from exc
        raise_for_api_error(response)
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ServerError(
                f"{method} {url} returned a non-JSON body", status_code=response.status_code,
            ) from exc

    def _parse(self, schema: type[M], data: Any) -> M:
        try:
            return schema.model_validate(data)
        except PydanticValidationError as exc:
            logger.debug("Unexpected %s payload: %r", schema.__name__, data)
            raise ServerError(f"Malformed {schema.__name__}: {exc.error_count()} error(s)") from exc

    def _parse_list(self, schema: type[M], data: Any) -> list[M]:
        if data is None:
            return []
        if not isinstance(data, list):
            raise ServerError(f"Expected a list of {schema.__name__}, got {type(data).__name__}")
        return [self._parse(schema, item) for item in data]
