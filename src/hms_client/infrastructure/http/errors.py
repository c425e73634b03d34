from __future__ import annotations

import httpx

from hms_client.application.exceptions import (
    AppError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)

_STATUS_ERRORS: dict[int, type[AppError]] = {
    400: ValidationError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
}


def _detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        return str(body.get("message") or body.get("detail") or response.reason_phrase)
    return response.reason_phrase


def raise_for_api_error(response: httpx.Response) -> None:
    """Translate a non-2xx response into the application error hierarchy."""
    if response.is_success:
        return
    detail = _detail(response)
    error_cls = _STATUS_ERRORS.get(response.status_code)
    if error_cls is not None:
        raise error_cls(detail)
    raise ServerError(detail, status_code=response.status_code)
