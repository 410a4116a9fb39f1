"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fedsearch.application.dtos.search import Intent, PopularSearch, SearchResult
    from fedsearch.application.dtos.search_history import (
        SearchHistoryCreate,
        SearchHistoryEntry,
    )
    from fedsearch.domain.enums import SourceType


# Content source adapter interface (read-only)
class IContentSourceAdapter(Protocol):
    """Protocol for one content store searched during fan-out."""

    source_type: SourceType

    async def search(self, intent: Intent) -> list[SearchResult]:
        """Return at most the per-source limit of normalized results for intent."""


# Search history repository interface
class ISearchHistoryRepository(Protocol):
    """Protocol for search history persistence and aggregation."""

    async def record_search(self, data: SearchHistoryCreate) -> None:
        """Append an entry, then delete the user's oldest entries beyond the cap."""

    async def suggestions(self, prefix: str, limit: int = 5) -> list[str]:
        """Return queries starting with prefix (case-insensitive), most frequent first."""

    async def popular_searches(
        self, limit: int = 10, since: datetime | None = None
    ) -> list[PopularSearch]:
        """Return most frequent queries (optionally since a cutoff), most frequent first."""

    async def recent_searches(
        self, user_id: str, limit: int = 10
    ) -> list[SearchHistoryEntry]:
        """Return the user's entries, newest first."""

    async def purge_older_than(self, cutoff: datetime) -> int:
        """Delete entries with timestamp before cutoff; return number deleted."""
