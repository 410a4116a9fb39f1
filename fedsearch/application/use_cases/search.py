"""Federated search use case: cache, parse, fan out, rank, record history."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable, Coroutine
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from fedsearch.application.dtos.search import ConversationTurn, PopularSearch, SearchResult
from fedsearch.application.dtos.search_history import SearchHistoryCreate, SearchHistoryEntry
from fedsearch.application.services.relevance_ranker import DEFAULT_MAX_RESULTS, rank
from fedsearch.core.constants import POPULAR_SEARCH_WINDOW_DAYS
from fedsearch.domain.exceptions import ValidationException
from fedsearch.shared.telemetry.logging import get_logger
from fedsearch.shared.telemetry.tracing import add_span_attributes, traced
from fedsearch.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from fedsearch.application.interfaces.repositories import ISearchHistoryRepository
    from fedsearch.application.interfaces.services import IIntentParser, ISearchResultCache
    from fedsearch.application.services.query_orchestrator import QueryOrchestrator

logger = get_logger(__name__)


class SearchService:
    """Entry point for a search request and the history-backed read operations.

    History writes are detached from the request: the caller gets results
    without waiting for the write, and a failed write is only logged.
    """

    def __init__(
        self,
        intent_parser: IIntentParser,
        orchestrator: QueryOrchestrator,
        cache: ISearchResultCache,
        history_repo: ISearchHistoryRepository | None,
        max_results: int = DEFAULT_MAX_RESULTS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.intent_parser = intent_parser
        self.orchestrator = orchestrator
        self.cache = cache
        self.history_repo = history_repo
        self.max_results = max_results
        self._clock = clock
        self._pending: set[asyncio.Task[None]] = set()

    @traced("search.perform")
    async def perform_search(
        self,
        query: str,
        user_id: str,
        conversation: list[ConversationTurn] | None = None,
    ) -> list[SearchResult]:
        """Run one search for user_id and return at most max_results ranked results.

        A cache hit returns the stored ranking without parsing or fan-out.
        History is recorded on hits and misses alike.

        Raises:
            ValidationException: If query is blank.
            SearchUnavailableException: If every content source failed.
        """
        if not query or not query.strip():
            raise ValidationException("Search query must not be empty", field="query")
        # The cache decides how to normalize its key; parsing and history see trimmed text.
        raw_query = query
        query = query.strip()
        started = time.perf_counter()

        cached = await self.cache.get(user_id, raw_query)
        if cached is not None:
            add_span_attributes(**{"search.cache_hit": True, "search.result_count": len(cached)})
            self._schedule_history(user_id, query, conversation, cached, started)
            return cached

        intent = await self.intent_parser.parse(query)
        raw = await self.orchestrator.execute(intent)
        results = rank(raw, intent, now=self._clock(), limit=self.max_results)

        await self.cache.put(user_id, raw_query, results)
        add_span_attributes(**{"search.cache_hit": False, "search.result_count": len(results)})
        self._schedule_history(user_id, query, conversation, results, started)
        return results

    def _schedule_history(
        self,
        user_id: str,
        query: str,
        conversation: list[ConversationTurn] | None,
        results: list[SearchResult],
        started: float,
    ) -> None:
        if self.history_repo is None:
            return
        data = SearchHistoryCreate(
            user_id=user_id,
            query=query,
            conversation=[turn.to_dict() for turn in conversation or []],
            result_count=len(results),
            source_types=sorted({r.source_type.value for r in results}),
            execution_time_ms=int((time.perf_counter() - started) * 1000),
        )
        self._spawn(self._record_history(data))

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _record_history(self, data: SearchHistoryCreate) -> None:
        try:
            await self.history_repo.record_search(data)
        except Exception:
            logger.exception("Failed to record search history for user %s", data.user_id)

    async def drain(self) -> None:
        """Wait for outstanding history writes (shutdown and tests)."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def get_suggestions(self, prefix: str, limit: int = 5) -> list[str]:
        """Past queries starting with prefix, most frequent first. Blank prefix gives []."""
        if self.history_repo is None or not prefix or not prefix.strip():
            return []
        return await self.history_repo.suggestions(prefix.strip(), limit=limit)

    async def get_popular_searches(self, limit: int = 10) -> list[PopularSearch]:
        """Most frequent queries across all users over the last week."""
        if self.history_repo is None:
            return []
        since = self._clock() - timedelta(days=POPULAR_SEARCH_WINDOW_DAYS)
        return await self.history_repo.popular_searches(limit=limit, since=since)

    async def get_recent_searches(self, user_id: str, limit: int = 10) -> list[SearchHistoryEntry]:
        """The user's own searches, newest first."""
        if self.history_repo is None:
            return []
        return await self.history_repo.recent_searches(user_id, limit=limit)
