"""QueryOrchestrator: concurrent fan-out, partial failure, timeouts, caps."""

import asyncio
import time

import pytest

from fedsearch.application.dtos.search import Intent, SearchResult
from fedsearch.application.services.query_orchestrator import QueryOrchestrator
from fedsearch.domain.enums import SourceType
from fedsearch.domain.exceptions import SearchUnavailableException


class FakeAdapter:
    """Adapter stub returning canned results, raising, or sleeping."""

    def __init__(
        self,
        source_type: SourceType,
        count: int = 1,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.source_type = source_type
        self.count = count
        self.error = error
        self.delay = delay
        self.calls = 0

    async def search(self, intent: Intent) -> list[SearchResult]:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return [
            SearchResult(
                id=f"{self.source_type.value}-{i}",
                source_type=self.source_type,
                title=f"Result {i}",
                description="",
                link="/",
            )
            for i in range(self.count)
        ]


def _intent(*types: SourceType) -> Intent:
    return Intent(source_types=frozenset(types) or SourceType.all(), keywords=("sign",))


async def test_results_concatenated_in_source_type_order() -> None:
    """Order follows SourceType declaration, not completion order."""
    files = FakeAdapter(SourceType.FILES, delay=0.05)
    events = FakeAdapter(SourceType.EVENTS)
    people = FakeAdapter(SourceType.PEOPLE, delay=0.02)
    orchestrator = QueryOrchestrator([events, people, files])

    results = await orchestrator.execute(_intent())

    assert [r.source_type for r in results] == [
        SourceType.FILES,
        SourceType.PEOPLE,
        SourceType.EVENTS,
    ]


async def test_only_requested_sources_are_invoked() -> None:
    files = FakeAdapter(SourceType.FILES)
    videos = FakeAdapter(SourceType.VIDEOS)
    orchestrator = QueryOrchestrator([files, videos])

    await orchestrator.execute(_intent(SourceType.VIDEOS, SourceType.SUPPLIERS))

    assert files.calls == 0
    assert videos.calls == 1


async def test_one_failing_adapter_does_not_fail_search() -> None:
    files = FakeAdapter(SourceType.FILES, count=2)
    events = FakeAdapter(SourceType.EVENTS, error=RuntimeError("db down"))
    orchestrator = QueryOrchestrator([files, events])

    results = await orchestrator.execute(_intent())

    assert [r.id for r in results] == ["files-0", "files-1"]


async def test_adapters_run_concurrently() -> None:
    """Wall time tracks the slowest adapter, not the sum of all of them."""
    adapters = [
        FakeAdapter(source_type, delay=0.2)
        for source_type in (
            SourceType.FILES,
            SourceType.PEOPLE,
            SourceType.EVENTS,
            SourceType.VIDEOS,
        )
    ]
    orchestrator = QueryOrchestrator(adapters)

    started = time.perf_counter()
    results = await orchestrator.execute(_intent())
    elapsed = time.perf_counter() - started

    assert len(results) == 4
    assert all(a.calls == 1 for a in adapters)
    assert elapsed < 0.5


async def test_slow_adapter_times_out_and_contributes_nothing() -> None:
    files = FakeAdapter(SourceType.FILES)
    slow = FakeAdapter(SourceType.STORIES, delay=1.0)
    orchestrator = QueryOrchestrator([files, slow], adapter_timeout_seconds=0.05)

    results = await orchestrator.execute(_intent())

    assert [r.source_type for r in results] == [SourceType.FILES]


async def test_each_adapter_capped_at_per_source_limit() -> None:
    orchestrator = QueryOrchestrator(
        [FakeAdapter(SourceType.FILES, count=25), FakeAdapter(SourceType.VIDEOS, count=3)]
    )
    results = await orchestrator.execute(_intent())
    by_source = {st: sum(r.source_type is st for r in results) for st in SourceType}
    assert by_source[SourceType.FILES] == 10
    assert by_source[SourceType.VIDEOS] == 3


async def test_all_adapters_failing_raises_unavailable() -> None:
    orchestrator = QueryOrchestrator(
        [
            FakeAdapter(SourceType.FILES, error=RuntimeError("boom")),
            FakeAdapter(SourceType.PEOPLE, delay=1.0),
        ],
        adapter_timeout_seconds=0.05,
    )
    with pytest.raises(SearchUnavailableException) as exc_info:
        await orchestrator.execute(_intent())
    assert exc_info.value.details["failed_sources"] == ["files", "people"]


async def test_no_matches_is_a_successful_empty_list() -> None:
    orchestrator = QueryOrchestrator(
        [FakeAdapter(SourceType.FILES, count=0), FakeAdapter(SourceType.EVENTS, count=0)]
    )
    assert await orchestrator.execute(_intent()) == []


async def test_no_registered_adapter_for_intent_returns_empty() -> None:
    orchestrator = QueryOrchestrator([FakeAdapter(SourceType.FILES)])
    assert await orchestrator.execute(_intent(SourceType.EQUIPMENT)) == []
