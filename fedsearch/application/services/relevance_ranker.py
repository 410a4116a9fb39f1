"""Relevance scoring and merge of fan-out results.

Heuristic score = keyword presence weight + recency boost. Pure functions:
inputs are not mutated and the same inputs always give the same order.
"""

import json
from collections.abc import Iterator
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Any

from fedsearch.application.dtos.search import Intent, SearchResult
from fedsearch.core.constants import (
    KEYWORD_MATCH_WEIGHT,
    RECENT_MONTH_BOOST,
    RECENT_MONTH_DAYS,
    RECENT_WEEK_BOOST,
    RECENT_WEEK_DAYS,
)
from fedsearch.shared.utils.datetime import EPOCH, ensure_utc, to_iso, utc_now

DEFAULT_MAX_RESULTS = 20


def _scalars(value: Any) -> Iterator[str]:
    """Yield every scalar inside value as text (dict values, list items)."""
    if isinstance(value, dict):
        for item in value.values():
            yield from _scalars(item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            yield from _scalars(item)
    elif value is not None:
        yield value if isinstance(value, str) else json.dumps(value, default=str)


def result_text_blob(result: SearchResult) -> str:
    """Case-folded text of a result's values (field names excluded)."""
    parts = [
        result.id,
        result.source_type.value,
        result.title,
        result.description,
        result.link,
        *_scalars(result.metadata),
        to_iso(result.created_at) or "",
    ]
    return " ".join(p for p in parts if p).casefold()


def recency_boost(created_at: datetime | None, now: datetime) -> int:
    """Boost for the tightest matching bucket (week beats month; not cumulative).

    Missing timestamps count as epoch and earn nothing.
    """
    age = now - (ensure_utc(created_at) or EPOCH)
    if age < timedelta(days=RECENT_WEEK_DAYS):
        return RECENT_WEEK_BOOST
    if age < timedelta(days=RECENT_MONTH_DAYS):
        return RECENT_MONTH_BOOST
    return 0


def score_result(result: SearchResult, keywords: tuple[str, ...], now: datetime) -> int:
    """Score one result: fixed weight per distinct keyword present, plus recency."""
    blob = result_text_blob(result)
    distinct = {k.casefold() for k in keywords if k}
    keyword_score = sum(KEYWORD_MATCH_WEIGHT for k in distinct if k in blob)
    return keyword_score + recency_boost(result.created_at, now)


def rank(
    results: list[SearchResult],
    intent: Intent,
    now: datetime | None = None,
    limit: int = DEFAULT_MAX_RESULTS,
) -> list[SearchResult]:
    """Score, stable-sort descending, and truncate.

    Ties keep their concatenation order. Returns new SearchResult objects;
    the input list and its items are left unchanged.

    Args:
        results: Concatenated adapter output.
        intent: Intent whose keywords drive scoring.
        now: Reference time for recency (defaults to current UTC time).
        limit: Maximum number of results returned.

    Returns:
        At most limit scored results, best first.
    """
    reference = ensure_utc(now) or utc_now()
    scored = [
        replace(r, score=score_result(r, intent.keywords, reference)) for r in results
    ]
    scored.sort(key=lambda r: r.score, reverse=True)
    return scored[:limit]
