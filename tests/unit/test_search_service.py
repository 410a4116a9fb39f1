"""SearchService unit tests with mocked parser, orchestrator, cache, and history."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from fedsearch.application.dtos.search import (
    ConversationTurn,
    Intent,
    PopularSearch,
    SearchResult,
)
from fedsearch.application.use_cases.search import SearchService
from fedsearch.domain.enums import SourceType
from fedsearch.domain.exceptions import SearchUnavailableException, ValidationException

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


class InMemoryResultCache:
    """ISearchResultCache stub keyed on (user, lowercased query)."""

    def __init__(self) -> None:
        self.entries: dict[tuple[str, str], list[SearchResult]] = {}

    async def get(self, user_id: str, query: str) -> list[SearchResult] | None:
        return self.entries.get((user_id, query.lower()))

    async def put(self, user_id, query, results, ttl=None) -> bool:
        self.entries[(user_id, query.lower())] = results
        return True


def _raw_results() -> list[SearchResult]:
    return [
        SearchResult(
            id="f1",
            source_type=SourceType.FILES,
            title="Old vinyl price sheet",
            description="",
            link="/library?id=f1",
            created_at=NOW - timedelta(days=90),
        ),
        SearchResult(
            id="p1",
            source_type=SourceType.FORUM_POSTS,
            title="Vinyl wrap pricing thread",
            description="",
            link="/forum/thread/p1",
            created_at=NOW - timedelta(days=2),
        ),
    ]


@pytest.fixture
def service_mocks():
    intent_parser = AsyncMock()
    intent_parser.parse = AsyncMock(
        return_value=Intent(source_types=SourceType.all(), keywords=("vinyl", "pricing"))
    )
    orchestrator = AsyncMock()
    orchestrator.execute = AsyncMock(return_value=_raw_results())
    history_repo = AsyncMock()
    cache = InMemoryResultCache()
    service = SearchService(
        intent_parser=intent_parser,
        orchestrator=orchestrator,
        cache=cache,
        history_repo=history_repo,
        clock=lambda: NOW,
    )
    return service, intent_parser, orchestrator, cache, history_repo


async def test_perform_search_ranks_and_caches(service_mocks) -> None:
    service, intent_parser, orchestrator, cache, _ = service_mocks

    results = await service.perform_search("vinyl pricing", "u1")

    assert [(r.id, r.score) for r in results] == [("p1", 25), ("f1", 10)]
    intent_parser.parse.assert_awaited_once_with("vinyl pricing")
    orchestrator.execute.assert_awaited_once()
    assert cache.entries[("u1", "vinyl pricing")] == results


async def test_cache_receives_query_as_typed(service_mocks) -> None:
    """Surrounding whitespace reaches the cache; parsing sees trimmed text."""
    service, intent_parser, _, cache, _ = service_mocks

    results = await service.perform_search("  vinyl pricing ", "u1")

    intent_parser.parse.assert_awaited_once_with("vinyl pricing")
    assert cache.entries == {("u1", "  vinyl pricing "): results}


async def test_second_search_is_served_from_cache(service_mocks) -> None:
    """Same (user, query) within TTL: identical results, no parse or fan-out."""
    service, intent_parser, orchestrator, _, _ = service_mocks

    first = await service.perform_search("vinyl pricing", "u1")
    second = await service.perform_search("vinyl pricing", "u1")

    assert second == first
    assert intent_parser.parse.await_count == 1
    assert orchestrator.execute.await_count == 1


async def test_cache_is_per_user(service_mocks) -> None:
    service, _, orchestrator, _, _ = service_mocks
    await service.perform_search("vinyl pricing", "u1")
    await service.perform_search("vinyl pricing", "u2")
    assert orchestrator.execute.await_count == 2


@pytest.mark.parametrize("query", ["", "   ", "\n\t"])
async def test_blank_query_rejected(service_mocks, query: str) -> None:
    service, intent_parser, _, _, _ = service_mocks
    with pytest.raises(ValidationException) as exc_info:
        await service.perform_search(query, "u1")
    assert exc_info.value.details == {"field": "query"}
    intent_parser.parse.assert_not_awaited()


async def test_history_recorded_for_hits_and_misses(service_mocks) -> None:
    service, _, _, _, history_repo = service_mocks
    conversation = [ConversationTurn(role="user", content="any vinyl deals?")]

    await service.perform_search("vinyl pricing", "u1", conversation=conversation)
    await service.perform_search("vinyl pricing", "u1")
    await service.drain()

    assert history_repo.record_search.await_count == 2
    first = history_repo.record_search.await_args_list[0].args[0]
    assert first.user_id == "u1"
    assert first.query == "vinyl pricing"
    assert first.result_count == 2
    assert first.source_types == ["files", "forumPosts"]
    assert first.conversation == [
        {"role": "user", "content": "any vinyl deals?", "timestamp": None}
    ]


async def test_history_failure_does_not_affect_results(service_mocks) -> None:
    service, _, _, _, history_repo = service_mocks
    history_repo.record_search = AsyncMock(side_effect=RuntimeError("db down"))

    results = await service.perform_search("vinyl pricing", "u1")
    await service.drain()

    assert len(results) == 2


async def test_total_failure_propagates_and_is_not_cached(service_mocks) -> None:
    service, _, orchestrator, cache, history_repo = service_mocks
    orchestrator.execute = AsyncMock(side_effect=SearchUnavailableException(["files"]))

    with pytest.raises(SearchUnavailableException):
        await service.perform_search("vinyl pricing", "u1")
    await service.drain()

    assert cache.entries == {}
    history_repo.record_search.assert_not_awaited()


async def test_popular_searches_use_seven_day_window(service_mocks) -> None:
    service, _, _, _, history_repo = service_mocks
    history_repo.popular_searches = AsyncMock(return_value=[PopularSearch("vinyl", 4)])

    popular = await service.get_popular_searches(limit=3)

    assert popular == [PopularSearch("vinyl", 4)]
    history_repo.popular_searches.assert_awaited_once_with(
        limit=3, since=NOW - timedelta(days=7)
    )


async def test_blank_suggestion_prefix_returns_empty(service_mocks) -> None:
    service, _, _, _, history_repo = service_mocks
    assert await service.get_suggestions("  ") == []
    history_repo.suggestions.assert_not_awaited()


async def test_recent_searches_delegate_to_history(service_mocks) -> None:
    service, _, _, _, history_repo = service_mocks
    history_repo.recent_searches = AsyncMock(return_value=[])
    assert await service.get_recent_searches("u1", limit=4) == []
    history_repo.recent_searches.assert_awaited_once_with("u1", limit=4)
