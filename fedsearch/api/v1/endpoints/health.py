"""Health check endpoints. Used for liveness and readiness probes."""

from fastapi import APIRouter, Request

from fedsearch.core.config import get_settings
from fedsearch.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check(request: Request) -> ReadinessResponse:
    """Report which backing services are usable.

    Cache and language model are optional (search degrades without them);
    status is 'degraded' only when the SQL database is not configured.
    """
    cache = getattr(request.app.state, "cache", None)
    database = getattr(request.app.state, "search_service", None) is not None
    return ReadinessResponse(
        status="ok" if database else "degraded",
        database=database,
        cache=bool(cache is not None and cache.is_available()),
        language_model=get_settings().llm_configured,
    )
