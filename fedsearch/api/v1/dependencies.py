"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the search service and the authenticated
user. The search service is built once at startup (build_search_service)
so pending history writes can be drained on shutdown; routes depend only
on these dependencies, not on infrastructure directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

import httpx
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from fedsearch.application.services.intent_parser import IntentParser
from fedsearch.application.services.query_orchestrator import QueryOrchestrator
from fedsearch.application.use_cases.search import SearchService
from fedsearch.domain.exceptions import AuthenticationException, SqlNotConfiguredException
from fedsearch.infrastructure.cache.search_cache import SearchResultCache
from fedsearch.infrastructure.external.llm.openrouter_client import OpenRouterClient
from fedsearch.infrastructure.persistence.adapters.registry import build_default_adapters
from fedsearch.infrastructure.persistence.database import get_session_factory
from fedsearch.infrastructure.persistence.repositories.search_history_repo import (
    SearchHistoryRepository,
)
from fedsearch.infrastructure.security.jwt import verify_token
from fedsearch.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from fedsearch.core.config import Settings
    from fedsearch.infrastructure.cache.redis_cache import CacheService

logger = get_logger(__name__)


def build_search_service(
    settings: Settings,
    cache: CacheService,
    http_client: httpx.AsyncClient,
) -> SearchService | None:
    """Wire SearchService from settings. Returns None when the SQL database is not configured."""
    try:
        session_factory = get_session_factory()
    except SqlNotConfiguredException:
        logger.warning("DATABASE_URL not set; search endpoints will return 503")
        return None

    llm_client = OpenRouterClient(http_client, settings) if settings.llm_configured else None
    if llm_client is None:
        logger.info("OPENROUTER_API_KEY not set; intent parsing uses keyword fallback")

    return SearchService(
        intent_parser=IntentParser(llm_client),
        orchestrator=QueryOrchestrator(
            build_default_adapters(session_factory, limit=settings.search_per_source_limit),
            per_source_limit=settings.search_per_source_limit,
            adapter_timeout_seconds=settings.search_adapter_timeout_seconds,
        ),
        cache=SearchResultCache(
            cache,
            ttl=settings.search_cache_ttl_seconds,
            normalize=settings.search_cache_normalize_keys,
        ),
        history_repo=SearchHistoryRepository(session_factory, cap=settings.search_history_cap),
        max_results=settings.search_max_results,
    )


def get_search_service(request: Request) -> SearchService:
    """Search service built at startup; 503 when the SQL database is not configured."""
    service = getattr(request.app.state, "search_service", None)
    if service is None:
        raise SqlNotConfiguredException()
    return service


_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str:
    """Return the user id (JWT sub) from the bearer token; raise 401 if missing or invalid."""
    if not credentials:
        raise AuthenticationException("Not authenticated")
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        raise AuthenticationException("Invalid or expired token") from e
    return str(payload["sub"])
