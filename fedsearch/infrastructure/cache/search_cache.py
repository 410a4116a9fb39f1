"""Ranked search result cache keyed by (user, query)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fedsearch.application.dtos.search import SearchResult
from fedsearch.infrastructure.cache.keys import search_results_key
from fedsearch.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from fedsearch.infrastructure.cache.cache_protocol import CacheProtocol

logger = get_logger(__name__)


class SearchResultCache:
    """ISearchResultCache on top of a CacheProtocol backend (CacheService). Never raises.

    Entries are stored as lists of SearchResult.to_dict() and rebuilt with
    from_dict(). A corrupt entry is deleted and reported as a miss.
    """

    def __init__(self, cache: CacheProtocol, ttl: int = 900, normalize: bool = True) -> None:
        self.cache = cache
        self.ttl = ttl
        self.normalize = normalize

    def _key(self, user_id: str, query: str) -> str | None:
        try:
            return search_results_key(user_id, query, normalize=self.normalize)
        except ValueError as e:
            logger.warning("Search results not cacheable: %s", e)
            return None

    async def get(self, user_id: str, query: str) -> list[SearchResult] | None:
        key = self._key(user_id, query)
        if key is None:
            return None
        payload = await self.cache.get(key)
        if payload is None:
            return None
        try:
            if not isinstance(payload, list):
                raise ValueError(f"expected list, got {type(payload).__name__}")
            return [SearchResult.from_dict(item) for item in payload]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Discarding corrupt cache entry %s: %s", key, e)
            await self.cache.delete(key)
            return None

    async def put(
        self,
        user_id: str,
        query: str,
        results: list[SearchResult],
        ttl: int | None = None,
    ) -> bool:
        key = self._key(user_id, query)
        if key is None:
            return False
        return await self.cache.set(key, [r.to_dict() for r in results], ttl=ttl or self.ttl)
