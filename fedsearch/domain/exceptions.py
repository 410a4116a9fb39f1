"""Domain exceptions for the federated search service.

Defines domain-level exceptions that represent failures the caller must
see. Recoverable failures (model outage, a single store down, cache
unavailable) never become exceptions at this level. Presentation layer
maps them to HTTP responses in exception handlers.
"""

from typing import Any


class FedSearchException(Exception):
    """Base exception for all application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, source types).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the API."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(FedSearchException):
    """Raised when input validation fails (e.g. blank query)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(FedSearchException):
    """Raised when the bearer token is missing, invalid, or expired."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class SearchUnavailableException(FedSearchException):
    """Raised when every content source failed for a search (total failure).

    Distinct from an empty result set, which is a successful outcome.
    """

    def __init__(self, failed_sources: list[str]) -> None:
        """Initialize with the sources that failed.

        Args:
            failed_sources: Source type values whose adapters errored or timed out.
        """
        super().__init__(
            "Search is temporarily unavailable",
            "SEARCH_UNAVAILABLE",
            {"failed_sources": failed_sources},
        )


class SqlNotConfiguredException(FedSearchException):
    """Raised when an operation requires the SQL database but DATABASE_URL is unset."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class LanguageModelError(FedSearchException):
    """Raised by the language-model client on transport, status, or format failure.

    Always recovered by the intent parser (fallback intent); never reaches the API.
    """

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        """Initialize with reason and optional provider HTTP status.

        Args:
            reason: Short description (e.g. 'timeout', 'malformed JSON').
            status_code: Provider response status when one was received.
        """
        details: dict[str, Any] = {"reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"Language model request failed: {reason}",
            "LANGUAGE_MODEL_ERROR",
            details,
        )


class LanguageModelNotConfiguredError(LanguageModelError):
    """Raised when no API key is configured for the language-model provider."""

    def __init__(self) -> None:
        super().__init__("API key not configured")
