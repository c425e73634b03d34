from __future__ import annotations

from typing import Protocol

from hms_client.domain.entities.search import SearchResults


class SearchReader(Protocol):
    async def search(self, query: str) -> SearchResults: ...
