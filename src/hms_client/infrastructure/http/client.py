from __future__ import annotations

import httpx

from hms_client.config import Settings
from hms_client.infrastructure.http.hooks import add_correlation_id, log_timing


def create_http_client(
    settings: Settings,
    token: str | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build the shared AsyncClient: base URL, bearer auth and hooks."""
    headers = {"Content-Type": "application/json"}
    token = token if token is not None else settings.API_TOKEN
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        headers=headers,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        transport=transport,
        event_hooks={
            "request": [add_correlation_id],
            "response": [log_timing],
        },
    )
