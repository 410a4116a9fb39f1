"""Redis cache: service, key builders, and the search result cache."""

from fedsearch.infrastructure.cache.cache_protocol import CacheProtocol
from fedsearch.infrastructure.cache.keys import normalize_query, search_results_key
from fedsearch.infrastructure.cache.redis_cache import CacheService
from fedsearch.infrastructure.cache.search_cache import SearchResultCache

__all__ = [
    "CacheProtocol",
    "CacheService",
    "SearchResultCache",
    "normalize_query",
    "search_results_key",
]
