"""Query orchestrator: concurrent fan-out of an Intent to content source adapters.

Adapters run as independent tasks joined with a collect-all combinator
(asyncio.gather with return_exceptions=True). A failing or slow adapter
contributes nothing; only when every invoked adapter fails is the search
reported as unavailable.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import TYPE_CHECKING

from fedsearch.application.dtos.search import Intent, SearchResult
from fedsearch.domain.enums import SourceType
from fedsearch.domain.exceptions import SearchUnavailableException
from fedsearch.shared.telemetry.logging import get_logger
from fedsearch.shared.telemetry.tracing import TracedOperation, add_span_attributes

if TYPE_CHECKING:
    from fedsearch.application.interfaces.repositories import IContentSourceAdapter

logger = get_logger(__name__)


class QueryOrchestrator:
    """Run the adapters selected by an Intent concurrently and concatenate results.

    Concatenation follows SourceType declaration order regardless of which
    adapter finishes first, so downstream tie-breaking is deterministic.
    """

    def __init__(
        self,
        adapters: Iterable[IContentSourceAdapter],
        per_source_limit: int = 10,
        adapter_timeout_seconds: float = 5.0,
    ) -> None:
        """Initialize with adapters (one per source type) and per-call bounds.

        Args:
            adapters: Adapter instances; a later adapter for the same source type replaces an earlier one.
            per_source_limit: Maximum results kept from any one adapter.
            adapter_timeout_seconds: Per-adapter timeout; on expiry the adapter contributes nothing.
        """
        self.adapters: dict[SourceType, IContentSourceAdapter] = {
            adapter.source_type: adapter for adapter in adapters
        }
        self.per_source_limit = per_source_limit
        self.adapter_timeout_seconds = adapter_timeout_seconds

    async def execute(self, intent: Intent) -> list[SearchResult]:
        """Fan out to every registered adapter named in intent.source_types.

        Raises:
            SearchUnavailableException: If every invoked adapter failed or timed out.
        """
        selected = [st for st in SourceType if st in intent.source_types and st in self.adapters]
        unregistered = sorted(st.value for st in intent.source_types if st not in self.adapters)
        if unregistered:
            logger.debug("No adapter registered for source types: %s", ", ".join(unregistered))
        if not selected:
            return []

        outcomes = await asyncio.gather(
            *(self._run_adapter(st, intent) for st in selected),
            return_exceptions=True,
        )

        merged: list[SearchResult] = []
        failed: list[str] = []
        for source_type, outcome in zip(selected, outcomes):
            if isinstance(outcome, BaseException):
                failed.append(source_type.value)
                if isinstance(outcome, TimeoutError):
                    logger.warning(
                        "Search adapter %s timed out after %ss",
                        source_type.value,
                        self.adapter_timeout_seconds,
                    )
                else:
                    logger.error(
                        "Search adapter %s failed: %s",
                        source_type.value,
                        outcome,
                        exc_info=outcome,
                    )
                continue
            merged.extend(outcome)

        add_span_attributes(
            **{
                "search.sources": len(selected),
                "search.failed_sources": len(failed),
                "search.raw_results": len(merged),
            }
        )
        if failed and len(failed) == len(selected):
            raise SearchUnavailableException(failed)
        return merged

    async def _run_adapter(self, source_type: SourceType, intent: Intent) -> list[SearchResult]:
        """Run one adapter under its timeout and cap its contribution."""
        adapter = self.adapters[source_type]
        async with TracedOperation(
            f"search.adapter.{source_type.value}",
            {"search.source_type": source_type.value},
        ) as op:
            results = await asyncio.wait_for(
                adapter.search(intent), timeout=self.adapter_timeout_seconds
            )
            if len(results) > self.per_source_limit:
                logger.warning(
                    "Search adapter %s returned %d results; keeping first %d",
                    source_type.value,
                    len(results),
                    self.per_source_limit,
                )
                results = results[: self.per_source_limit]
            if op.span is not None:
                op.span.set_attribute("search.result_count", len(results))
            return results
