"""DTOs for federated search (no dependency on ORM or presentation schemas)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from fedsearch.domain.enums import SortPreference, SourceType
from fedsearch.shared.utils.datetime import parse_iso, to_iso


@dataclass(frozen=True)
class DateWindow:
    """Concrete interval resolved from a named date bucket. end=None means open-ended."""

    start: datetime
    end: datetime | None = None


@dataclass(frozen=True)
class IntentFilters:
    """Validated filters extracted from a query."""

    tags: frozenset[str] = frozenset()
    date_range: DateWindow | None = None
    location: str | None = None


@dataclass(frozen=True)
class Intent:
    """Structured interpretation of a free-text query.

    source_types is never empty; keywords are lowercase, longer than two
    characters, and de-duplicated in first-seen order.
    """

    source_types: frozenset[SourceType]
    keywords: tuple[str, ...] = ()
    filters: IntentFilters = field(default_factory=IntentFilters)
    sort_preference: SortPreference = SortPreference.RELEVANCE


@dataclass
class SearchResult:
    """Normalized hit from one content source.

    id is unique within source_type only. metadata holds JSON-safe values
    for UI rendering (dates as ISO strings). score is 0 until ranked.
    """

    id: str
    source_type: SourceType
    title: str
    description: str
    link: str
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    score: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-safe dict (cache payload and scoring blob)."""
        return {
            "id": self.id,
            "source_type": self.source_type.value,
            "title": self.title,
            "description": self.description,
            "link": self.link,
            "metadata": self.metadata,
            "created_at": to_iso(self.created_at),
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SearchResult":
        """Rebuild from to_dict() output. Raises KeyError/ValueError on malformed input."""
        return cls(
            id=str(data["id"]),
            source_type=SourceType(data["source_type"]),
            title=data["title"],
            description=data["description"],
            link=data["link"],
            metadata=dict(data.get("metadata") or {}),
            created_at=parse_iso(data.get("created_at")),
            score=int(data.get("score", 0)),
        )


@dataclass(frozen=True)
class ConversationTurn:
    """One prior turn of a conversational search session."""

    role: str
    content: str
    timestamp: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role,
            "content": self.content,
            "timestamp": to_iso(self.timestamp),
        }


@dataclass(frozen=True)
class PopularSearch:
    """Aggregated query text with its occurrence count."""

    query: str
    count: int
