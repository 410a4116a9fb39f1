"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready: which backing services are usable."""

    status: str = Field(default="ok", description="ok | degraded")
    database: bool = Field(..., description="SQL database configured")
    cache: bool = Field(..., description="Redis cache connected")
    language_model: bool = Field(..., description="Intent parsing provider configured")
