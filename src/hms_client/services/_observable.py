from __future__ import annotations

import logging
from typing import Callable

from hms_client.application.subscription import Subscription

logger = logging.getLogger(__name__)

Watcher = Callable[[], None]


class Observable:
    """Synchronous change notification for state holders."""

    def __init__(self) -> None:
        self._watchers: list[Watcher] = []

    def watch(self, callback: Watcher) -> Subscription:
        self._watchers.append(callback)

        def _release() -> None:
            if callback in self._watchers:
                self._watchers.remove(callback)

        return Subscription(_release)

    def _notify(self) -> None:
        for callback in list(self._watchers):
            try:
                callback()
            except Exception:
                logger.exception("Watcher of %s failed", type(self).__name__)
