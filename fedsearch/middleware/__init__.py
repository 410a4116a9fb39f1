"""HTTP middleware: timeout, request ID, correlation ID.

Applied in main app; order matters (first added = outermost).
Import and use from fedsearch.main.
"""

from fedsearch.middleware.request_context import (
    CorrelationIDMiddleware,
    RequestIDMiddleware,
)
from fedsearch.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
