"""Application lifespan: startup and shutdown.

Wiring only. Startup opens the shared HTTP client (language-model calls),
connects the Redis result cache, builds the search service, and enables
tracing. Shutdown reverses it after draining pending history writes.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from fedsearch.api.v1.dependencies import build_search_service
from fedsearch.core.config import get_settings
from fedsearch.infrastructure.cache.redis_cache import CacheService
from fedsearch.infrastructure.persistence.database import dispose_engine
from fedsearch.shared.telemetry.telemetry import setup_tracing, shutdown_tracing

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup, yield to serve requests, then run shutdown.

    app.state.search_service is None when DATABASE_URL is unset; search
    routes then answer 503 and readiness reports degraded.
    """
    settings = get_settings()

    # ---- Startup ----
    http_client = httpx.AsyncClient(timeout=settings.openrouter_timeout_seconds)
    cache = CacheService(settings=settings)
    await cache.connect()

    app.state.http_client = http_client
    app.state.cache = cache
    app.state.search_service = build_search_service(settings, cache, http_client)
    setup_tracing(app, settings, instrument_redis=cache.is_available())
    logger.info(
        "Startup complete: database=%s cache=%s language_model=%s",
        app.state.search_service is not None,
        cache.is_available(),
        settings.llm_configured,
    )

    yield

    # ---- Shutdown ----
    if app.state.search_service is not None:
        await app.state.search_service.drain()
        logger.info("Pending search history writes drained")

    await http_client.aclose()
    await cache.disconnect()
    shutdown_tracing()
    await dispose_engine()
    logger.info("Shutdown complete")
