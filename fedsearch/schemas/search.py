"""Search API schemas."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from fedsearch.domain.enums import SourceType


class ConversationTurnRequest(BaseModel):
    """One prior turn of a conversational search."""

    role: Literal["user", "assistant"]
    content: str = Field(..., max_length=2000)
    timestamp: datetime | None = None


class SearchRequest(BaseModel):
    """Body for POST /search."""

    query: str = Field(..., min_length=1, max_length=500)
    conversation: list[ConversationTurnRequest] = Field(default_factory=list, max_length=50)


class SearchResultResponse(BaseModel):
    """Single ranked hit from one content source."""

    id: str
    source_type: SourceType = Field(..., description="Content store the hit came from")
    title: str
    description: str
    link: str = Field(..., description="UI deep link")
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None
    score: int


class SearchResponse(BaseModel):
    """Federated search response (ranked hits, best first)."""

    query: str
    count: int
    results: list[SearchResultResponse]


class SuggestionsResponse(BaseModel):
    """Past queries matching a prefix."""

    suggestions: list[str]


class PopularSearchResponse(BaseModel):
    query: str
    count: int


class PopularSearchesResponse(BaseModel):
    searches: list[PopularSearchResponse]


class RecentSearchResponse(BaseModel):
    """One of the caller's past searches."""

    query: str
    timestamp: datetime
    conversation: list[dict[str, Any]] = Field(default_factory=list)
    result_count: int = 0


class RecentSearchesResponse(BaseModel):
    searches: list[RecentSearchResponse]
