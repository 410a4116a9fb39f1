"""Shared telemetry: logging setup, tracer provider, and tracing helpers."""

from fedsearch.shared.telemetry.logging import get_logger, setup_logging
from fedsearch.shared.telemetry.telemetry import setup_tracing, shutdown_tracing
from fedsearch.shared.telemetry.tracing import (
    TracedOperation,
    add_span_attributes,
    traced,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "setup_tracing",
    "shutdown_tracing",
    "traced",
    "add_span_attributes",
    "TracedOperation",
]
