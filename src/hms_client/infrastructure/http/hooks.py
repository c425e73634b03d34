"""httpx event hooks: correlation id header and request timing."""
from __future__ import annotations

import logging
import time
import uuid
from contextvars import ContextVar

import httpx

logger = logging.getLogger(__name__)

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")

HEADER = "X-Request-ID"


async def add_correlation_id(request: httpx.Request) -> None:
    cid = correlation_id_ctx.get() or uuid.uuid4().hex
    request.headers.setdefault(HEADER, cid)
    request.extensions["started_at"] = time.perf_counter()


async def log_timing(response: httpx.Response) -> None:
    request = response.request
    started = request.extensions.get("started_at")
    elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
    logger.info(
        "%s %s %s %.1fms",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
