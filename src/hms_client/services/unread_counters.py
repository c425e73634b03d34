"""Process-wide unread counters for messages and notifications."""
from __future__ import annotations

import logging
from typing import Awaitable, Callable

from hms_client.application.exceptions import AppError
from hms_client.domain.entities.notification import UnreadCounts
from hms_client.domain.value_objects.enums import CounterKind
from hms_client.services._observable import Observable

logger = logging.getLogger(__name__)

Reconciler = Callable[[], Awaitable[UnreadCounts]]


class UnreadCounters(Observable):
    """Optimistic local counters reconciled against the server on demand.

    One instance per session, shared by reference. Between a local
    adjustment and the next reconciling fetch the values may be off; the
    fetch overwrites them. Responses to fetches older than the last applied
    one are discarded.
    """

    def __init__(self, reconcile: Reconciler) -> None:
        super().__init__()
        self._reconcile = reconcile
        self._counts: dict[CounterKind, int] = {
            CounterKind.MESSAGE: 0,
            CounterKind.NOTIFICATION: 0,
        }
        self._issued = 0
        self._applied = 0

    @property
    def message(self) -> int:
        return self._counts[CounterKind.MESSAGE]

    @property
    def notification(self) -> int:
        return self._counts[CounterKind.NOTIFICATION]

    def snapshot(self) -> UnreadCounts:
        return UnreadCounts(message=self.message, notification=self.notification)

    async def fetch_unread_count(self) -> UnreadCounts:
        self._issued += 1
        seq = self._issued
        try:
            counts = await self._reconcile()
        except AppError as exc:
            logger.warning("Error fetching unread count: %s", exc.detail)
            return self.snapshot()

        if seq < self._applied:
            logger.debug("Dropping stale unread count response #%d", seq)
            return self.snapshot()
        self._applied = seq
        self._counts[CounterKind.MESSAGE] = max(0, counts.message)
        self._counts[CounterKind.NOTIFICATION] = max(0, counts.notification)
        self._notify()
        return self.snapshot()

    def increment(self, kind: CounterKind, n: int = 1) -> None:
        if n <= 0:
            return
        self._counts[kind] += n
        self._notify()

    def decrement(self, kind: CounterKind, n: int = 1) -> None:
        if n <= 0:
            return
        self._counts[kind] = max(0, self._counts[kind] - n)
        self._notify()

    def reset(self, kind: CounterKind) -> None:
        self._counts[kind] = 0
        self._notify()
