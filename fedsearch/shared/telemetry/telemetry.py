"""OpenTelemetry tracer provider for the search service.

Spans come from FastAPI and Redis instrumentation plus the search pipeline
spans opened in fedsearch.shared.telemetry.tracing (intent parsing, one
span per adapter call). TELEMETRY_EXPORTER selects console, otlp, or none.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

if TYPE_CHECKING:
    from fastapi import FastAPI

    from fedsearch.core.config import Settings

logger = logging.getLogger(__name__)

# Health probes would otherwise dominate the trace volume.
_EXCLUDED_URLS = "/api/v1/health"

_provider: TracerProvider | None = None


def _build_exporter(settings: Settings) -> SpanExporter | None:
    kind = settings.telemetry_exporter.lower()
    if kind == "none":
        return None
    if kind == "otlp":
        endpoint = settings.telemetry_otlp_endpoint
        if endpoint:
            return OTLPSpanExporter(endpoint=endpoint, insecure=endpoint.startswith("http://"))
        logger.warning("TELEMETRY_OTLP_ENDPOINT not set; using console exporter")
    elif kind != "console":
        logger.warning("Unknown telemetry exporter '%s'; using console exporter", kind)
    return ConsoleSpanExporter()


def setup_tracing(
    app: FastAPI,
    settings: Settings,
    instrument_redis: bool = False,
) -> TracerProvider | None:
    """Install the global tracer provider and instrument the app.

    Redis is instrumented only when the result cache is connected. Returns
    None when TELEMETRY_ENABLED is false. Instrumentation failures are logged
    and the app keeps running untraced.
    """
    global _provider
    if not settings.telemetry_enabled:
        return None

    provider = TracerProvider(
        resource=Resource(
            attributes={
                SERVICE_NAME: settings.app_name,
                SERVICE_VERSION: settings.app_version,
                "deployment.environment": settings.telemetry_environment,
            }
        ),
        sampler=TraceIdRatioBased(settings.telemetry_sample_rate),
    )
    exporter = _build_exporter(settings)
    if exporter is not None:
        provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    _provider = provider

    try:
        FastAPIInstrumentor.instrument_app(
            app, tracer_provider=provider, excluded_urls=_EXCLUDED_URLS
        )
        if instrument_redis:
            RedisInstrumentor().instrument(tracer_provider=provider)
    except Exception:
        logger.exception("Failed to instrument app for tracing")

    logger.info(
        "Tracing enabled: service=%s exporter=%s sample_rate=%s redis=%s",
        settings.app_name,
        settings.telemetry_exporter,
        settings.telemetry_sample_rate,
        instrument_redis,
    )
    return provider


def shutdown_tracing() -> None:
    """Flush pending spans and drop the provider (no-op if tracing never started)."""
    global _provider
    if _provider is None:
        return
    try:
        _provider.shutdown()
    except Exception:
        logger.exception("Error during telemetry shutdown")
    _provider = None
