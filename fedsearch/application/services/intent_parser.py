"""Intent parser: free-text query to structured Intent.

One language-model call per query, no retries. The model reply is treated
as untrusted input and coerced field by field; any failure yields the
deterministic keyword fallback so a search always has an intent.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from fedsearch.application.dtos.search import DateWindow, Intent, IntentFilters
from fedsearch.application.services.date_ranges import resolve_date_range
from fedsearch.core.constants import MIN_KEYWORD_LENGTH
from fedsearch.domain.enums import SortPreference, SourceType
from fedsearch.domain.exceptions import LanguageModelError
from fedsearch.shared.telemetry.logging import get_logger
from fedsearch.shared.telemetry.tracing import add_span_attributes, traced
from fedsearch.shared.utils.datetime import parse_iso, utc_now

if TYPE_CHECKING:
    from fedsearch.application.interfaces.services import ILanguageModelClient

logger = get_logger(__name__)

INTENT_SYSTEM_PROMPT = """You are a search intent parser for a sign company dashboard. \
Parse the user's query and return a JSON object with:
- dataTypes: array of types to search (files, owners, events, forum, stories, videos, equipment, suppliers)
- filters: object with specific filters (dateRange, location, tags). dateRange is one of: \
"last week", "this month", "last month", "this year", "Q1", "Q2", "Q3", "Q4"
- keywords: array of important keywords
- sortBy: how to sort results (relevance, date, popularity)
Return only the JSON object, with no other text."""


def extract_keywords(words: Iterable[str]) -> tuple[str, ...]:
    """Lowercase, drop tokens shorter than MIN_KEYWORD_LENGTH, de-duplicate in order."""
    seen: dict[str, None] = {}
    for word in words:
        token = word.strip().lower()
        if len(token) >= MIN_KEYWORD_LENGTH:
            seen.setdefault(token, None)
    return tuple(seen)


def fallback_intent(query: str) -> Intent:
    """Deterministic intent used when the model is unavailable or its reply is unusable.

    All source types, no filters, whitespace-split keywords, relevance sort.
    """
    return Intent(
        source_types=SourceType.all(),
        keywords=extract_keywords(query.split()),
        filters=IntentFilters(),
        sort_preference=SortPreference.RELEVANCE,
    )


def _as_list(value: Any) -> list[Any]:
    """Accept a list, a single string (comma separated), or anything else (empty)."""
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        return [part for part in value.split(",") if part.strip()]
    return []


class IntentParser:
    """Parse queries into Intent using an injected language-model client.

    The client may be None (no provider configured): every query then uses
    fallback_intent().
    """

    def __init__(
        self,
        llm_client: ILanguageModelClient | None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.llm_client = llm_client
        self._clock = clock

    @traced("search.parse_intent")
    async def parse(self, query: str) -> Intent:
        """Return the intent for query. Never raises for provider failures."""
        if self.llm_client is None:
            add_span_attributes(**{"intent.fallback": True})
            return fallback_intent(query)
        messages = [
            {"role": "system", "content": INTENT_SYSTEM_PROMPT},
            {"role": "user", "content": query},
        ]
        try:
            payload = await self.llm_client.complete_json(messages)
        except LanguageModelError as e:
            logger.warning(
                "Intent parsing failed (%s); using keyword fallback", e.details.get("reason")
            )
            add_span_attributes(**{"intent.fallback": True})
            return fallback_intent(query)
        except Exception:
            logger.exception("Unexpected intent parsing error; using keyword fallback")
            add_span_attributes(**{"intent.fallback": True})
            return fallback_intent(query)
        intent = self.coerce(payload, query)
        add_span_attributes(
            **{
                "intent.fallback": False,
                "intent.source_count": len(intent.source_types),
                "intent.keyword_count": len(intent.keywords),
            }
        )
        return intent

    def coerce(self, payload: Any, query: str) -> Intent:
        """Validate a model reply into an Intent, defaulting every field.

        Args:
            payload: Decoded JSON from the model (any shape).
            query: Original query, used for fallback keywords.

        Returns:
            Intent with non-empty source_types and validated filters.
        """
        if not isinstance(payload, dict):
            logger.warning("Intent payload is %s, not an object; using fallback", type(payload).__name__)
            return fallback_intent(query)

        source_types = frozenset(
            st
            for st in (SourceType.coerce(raw) for raw in _as_list(payload.get("dataTypes")))
            if st is not None
        ) or SourceType.all()

        raw_keywords = [k for k in _as_list(payload.get("keywords")) if isinstance(k, str)]
        keywords = extract_keywords(raw_keywords) or extract_keywords(query.split())

        return Intent(
            source_types=source_types,
            keywords=keywords,
            filters=self._coerce_filters(payload.get("filters")),
            sort_preference=SortPreference.coerce(payload.get("sortBy")),
        )

    def _coerce_filters(self, raw: Any) -> IntentFilters:
        """Keep only tags, dateRange, and location; drop anything malformed."""
        if not isinstance(raw, dict):
            return IntentFilters()
        tags = frozenset(
            t.strip() for t in _as_list(raw.get("tags")) if isinstance(t, str) and t.strip()
        )
        location = raw.get("location")
        location = location.strip() if isinstance(location, str) and location.strip() else None
        return IntentFilters(
            tags=tags,
            date_range=self._coerce_date_range(raw.get("dateRange")),
            location=location,
        )

    def _coerce_date_range(self, raw: Any) -> DateWindow | None:
        """Resolve a bucket name or an explicit {start, end} object."""
        if isinstance(raw, str) and raw.strip():
            return resolve_date_range(raw, self._clock())
        if isinstance(raw, dict):
            start = parse_iso(raw.get("start")) if isinstance(raw.get("start"), str) else None
            end = parse_iso(raw.get("end")) if isinstance(raw.get("end"), str) else None
            if start is not None:
                return DateWindow(start=start, end=end)
        return None
