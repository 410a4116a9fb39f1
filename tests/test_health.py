"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_readiness_reports_degraded_without_database(client: AsyncClient) -> None:
    """Without DATABASE_URL (and no lifespan wiring) readiness is degraded, not an error."""
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "degraded"
    assert data["database"] is False
    assert data["cache"] is False
    assert data["language_model"] is False


async def test_request_id_is_generated_and_echoed(client: AsyncClient) -> None:
    """A response carries X-Request-ID; a safe client value is forwarded unchanged."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"
    assert response.headers["X-Correlation-ID"] == "abc-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    """Header values with unsafe characters are not echoed (log injection)."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id; x"})
    assert response.headers["X-Request-ID"] != "bad id; x"
    assert len(response.headers["X-Request-ID"]) == 36
