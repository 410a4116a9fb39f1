"""Application DTOs: plain dataclasses passed between layers."""

from fedsearch.application.dtos.search import (
    ConversationTurn,
    DateWindow,
    Intent,
    IntentFilters,
    PopularSearch,
    SearchResult,
)
from fedsearch.application.dtos.search_history import (
    SearchHistoryCreate,
    SearchHistoryEntry,
)

__all__ = [
    "ConversationTurn",
    "DateWindow",
    "Intent",
    "IntentFilters",
    "PopularSearch",
    "SearchHistoryCreate",
    "SearchHistoryEntry",
    "SearchResult",
]
