from __future__ import annotations

from hms_client.domain.entities.search import SearchResults
from hms_client.infrastructure.http.mappers.search import search_to_entity
from hms_client.infrastructure.http.repositories._base import ApiRepo
from hms_client.infrastructure.http.schemas.search import SearchResponse


class SearchReaderRepo(ApiRepo):
    async def search(self, query: str) -> SearchResults:
        data = await self._request("GET", "/search", params={"q": query})
        return search_to_entity(self._parse(SearchResponse, data or {}))
