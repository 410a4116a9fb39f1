"""CacheService, cache key builders, and SearchResultCache with a mocked Redis client."""

import json
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from fedsearch.application.dtos.search import SearchResult
from fedsearch.core.config import get_settings
from fedsearch.domain.enums import SourceType
from fedsearch.infrastructure.cache.keys import normalize_query, search_results_key
from fedsearch.infrastructure.cache.redis_cache import CacheService
from fedsearch.infrastructure.cache.search_cache import SearchResultCache


def _result() -> SearchResult:
    return SearchResult(
        id="v1",
        source_type=SourceType.VIDEOS,
        title="Wrapping a box truck",
        description="Step by step",
        link="/videos?id=v1",
        metadata={"views": 12, "tags": ["vinyl"]},
        created_at=datetime(2025, 3, 4, 5, 6, 7, tzinfo=UTC),
        score=15,
    )


class TestKeys:
    def test_normalize_query(self) -> None:
        assert normalize_query("  Vinyl   SIGNS\t") == "vinyl signs"

    def test_normalized_queries_share_a_key(self) -> None:
        assert search_results_key("u1", "Vinyl Signs") == search_results_key("u1", " vinyl  signs ")

    def test_exact_match_keys_when_normalization_disabled(self) -> None:
        assert search_results_key("u1", "Vinyl Signs", normalize=False) != search_results_key(
            "u1", "vinyl signs", normalize=False
        )
        assert search_results_key("u1", "vinyl signs", normalize=False) != search_results_key(
            "u1", " vinyl signs ", normalize=False
        )

    def test_key_format(self) -> None:
        key = search_results_key("u1", "vinyl")
        prefix, user_id, digest = key.split(":")
        assert (prefix, user_id) == ("search", "u1")
        assert len(digest) == 64

    def test_user_id_with_separator_rejected(self) -> None:
        with pytest.raises(ValueError):
            search_results_key("a:b", "vinyl")


@pytest.fixture
def redis_client() -> AsyncMock:
    client = AsyncMock()
    client.get = AsyncMock(return_value=None)
    client.setex = AsyncMock(return_value=True)
    client.delete = AsyncMock(return_value=1)
    return client


class TestCacheService:
    async def test_unavailable_cache_is_a_miss(self) -> None:
        cache = CacheService(settings=get_settings())
        assert cache.is_available() is False
        assert await cache.get("k") is None
        assert await cache.set("k", [1]) is False

    async def test_connect_is_noop_when_disabled(self) -> None:
        settings = get_settings().model_copy(update={"redis_enabled": False})
        cache = CacheService(settings=settings)
        await cache.connect()
        assert cache.is_available() is False

    async def test_set_serializes_with_ttl(self, redis_client: AsyncMock) -> None:
        cache = CacheService(redis_client=redis_client, settings=get_settings())
        assert await cache.set("k", {"a": 1}, ttl=60) is True
        redis_client.setex.assert_awaited_once_with("k", 60, json.dumps({"a": 1}))

    async def test_get_decodes_json(self, redis_client: AsyncMock) -> None:
        redis_client.get = AsyncMock(return_value='{"a": 1}')
        cache = CacheService(redis_client=redis_client, settings=get_settings())
        assert await cache.get("k") == {"a": 1}

    async def test_invalid_json_is_a_miss(self, redis_client: AsyncMock) -> None:
        redis_client.get = AsyncMock(return_value="{not json")
        cache = CacheService(redis_client=redis_client, settings=get_settings())
        assert await cache.get("k") is None

    async def test_redis_error_is_a_miss(self, redis_client: AsyncMock) -> None:
        redis_client.get = AsyncMock(side_effect=redis.RedisError("boom"))
        cache = CacheService(redis_client=redis_client, settings=get_settings())
        assert await cache.get("k") is None


class TestSearchResultCache:
    async def test_put_then_get_rebuilds_results(self, redis_client: AsyncMock) -> None:
        cache = CacheService(redis_client=redis_client, settings=get_settings())
        result_cache = SearchResultCache(cache, ttl=900)

        assert await result_cache.put("u1", "Box Truck", [_result()]) is True
        key, ttl, payload = redis_client.setex.await_args.args
        assert key == search_results_key("u1", "box truck")
        assert ttl == 900

        redis_client.get = AsyncMock(return_value=payload)
        assert await result_cache.get("u1", "box   truck") == [_result()]

    async def test_corrupt_entry_is_deleted_and_missed(self, redis_client: AsyncMock) -> None:
        redis_client.get = AsyncMock(return_value=json.dumps([{"id": "x"}]))
        cache = CacheService(redis_client=redis_client, settings=get_settings())
        result_cache = SearchResultCache(cache)

        assert await result_cache.get("u1", "vinyl") is None
        redis_client.delete.assert_awaited_once_with(search_results_key("u1", "vinyl"))

    async def test_uncacheable_user_id_is_a_miss(self, redis_client: AsyncMock) -> None:
        cache = CacheService(redis_client=redis_client, settings=get_settings())
        result_cache = SearchResultCache(cache)
        assert await result_cache.get("a:b", "vinyl") is None
        assert await result_cache.put("a:b", "vinyl", []) is False
        redis_client.get.assert_not_awaited()
