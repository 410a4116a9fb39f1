"""DTOs for search history (read-model and write-model)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class SearchHistoryCreate:
    """Input for recording one search invocation."""

    user_id: str
    query: str
    conversation: list[dict[str, Any]] = field(default_factory=list)
    result_count: int = 0
    source_types: list[str] = field(default_factory=list)
    execution_time_ms: int | None = None


@dataclass(frozen=True)
class SearchHistoryEntry:
    """Search history read-model (recent searches)."""

    id: str
    user_id: str
    query: str
    timestamp: datetime
    conversation: list[dict[str, Any]] = field(default_factory=list)
    result_count: int = 0
