"""API request/response schemas (Pydantic)."""

from fedsearch.schemas.health import HealthResponse, ReadinessResponse
from fedsearch.schemas.search import (
    ConversationTurnRequest,
    PopularSearchesResponse,
    PopularSearchResponse,
    RecentSearchesResponse,
    RecentSearchResponse,
    SearchRequest,
    SearchResponse,
    SearchResultResponse,
    SuggestionsResponse,
)

__all__ = [
    "ConversationTurnRequest",
    "HealthResponse",
    "PopularSearchResponse",
    "PopularSearchesResponse",
    "ReadinessResponse",
    "RecentSearchResponse",
    "RecentSearchesResponse",
    "SearchRequest",
    "SearchResponse",
    "SearchResultResponse",
    "SuggestionsResponse",
]
