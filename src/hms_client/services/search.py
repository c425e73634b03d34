"""Debounced global search across patients, doctors, appointments and medicines."""
from __future__ import annotations

import asyncio
import logging

from hms_client.application.exceptions import AppError
from hms_client.application.ports.toast import Toaster
from hms_client.application.repositories.search import SearchReader
from hms_client.config import settings
from hms_client.domain.entities.search import SearchResults
from hms_client.services._observable import Observable

logger = logging.getLogger(__name__)


class DebouncedSearch(Observable):
    """Sends at most one request per quiet period of typing.

    Requests are numbered; a response only lands if no newer request was
    issued (or the query cleared) in the meantime. In-flight requests are
    not cancelled.
    """

    def __init__(
        self,
        reader: SearchReader,
        toaster: Toaster,
        *,
        delay: float | None = None,
        min_length: int | None = None,
    ) -> None:
        super().__init__()
        self._reader = reader
        self._toaster = toaster
        self._delay = settings.SEARCH_DEBOUNCE_SECONDS if delay is None else delay
        self._min_length = settings.SEARCH_MIN_QUERY_LENGTH if min_length is None else min_length
        self._query = ""
        self._results: SearchResults | None = None
        self._loading = False
        self._issued = 0
        self._timer: asyncio.Task[None] | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def query(self) -> str:
        return self._query

    @property
    def results(self) -> SearchResults | None:
        return self._results

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def total(self) -> int:
        return self._results.total if self._results else 0

    def set_query(self, text: str) -> None:
        """Feed the current input; must be called from the event loop."""
        self._query = text
        self._cancel_timer()

        if len(text.strip()) < self._min_length:
            self._issued += 1
            if self._results is not None or self._loading:
                self._results = None
                self._loading = False
                self._notify()
            return

        task = asyncio.get_running_loop().create_task(
            self._debounced(text.strip()), name="search-debounce",
        )
        self._timer = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def clear(self) -> None:
        self.set_query("")

    async def settle(self) -> None:
        """Wait until no timer or request is pending."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        self._cancel_timer()

    async def _debounced(self, text: str) -> None:
        await asyncio.sleep(self._delay)
        self._timer = None
        self._issued += 1
        seq = self._issued

        self._loading = True
        self._notify()
        try:
            results = await self._reader.search(text)
        except AppError as exc:
            logger.warning("Search for %r failed: %s", text, exc.detail)
            if seq == self._issued:
                self._loading = False
                self._toaster.error("Search failed")
                self._notify()
            return

        if seq != self._issued:
            logger.debug("Dropping stale results for %r", text)
            return
        self._results = results
        self._loading = False
        self._notify()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
