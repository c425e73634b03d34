from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Toaster(Protocol):
    """Transient user-facing messages."""

    def success(self, text: str) -> None: ...
    def error(self, text: str) -> None: ...


class LoggingToaster:
    """Toaster for headless callers: toasts end up in the log."""

    def success(self, text: str) -> None:
        logger.info("%s", text)

    def error(self, text: str) -> None:
        logger.warning("%s", text)
