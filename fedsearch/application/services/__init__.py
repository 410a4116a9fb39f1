"""Application services: intent parsing, fan-out orchestration, relevance ranking."""

from fedsearch.application.services.date_ranges import resolve_date_range
from fedsearch.application.services.intent_parser import (
    IntentParser,
    extract_keywords,
    fallback_intent,
)
from fedsearch.application.services.query_orchestrator import QueryOrchestrator
from fedsearch.application.services.relevance_ranker import rank, score_result

__all__ = [
    "IntentParser",
    "QueryOrchestrator",
    "extract_keywords",
    "fallback_intent",
    "rank",
    "resolve_date_range",
    "score_result",
]
