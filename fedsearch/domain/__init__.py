"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from fedsearch.domain.enums import MemberRole, SortPreference, SourceType
from fedsearch.domain.exceptions import (
    AuthenticationException,
    FedSearchException,
    LanguageModelError,
    LanguageModelNotConfiguredError,
    SearchUnavailableException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    # Enums
    "MemberRole",
    "SortPreference",
    "SourceType",
    # Exceptions
    "AuthenticationException",
    "FedSearchException",
    "LanguageModelError",
    "LanguageModelNotConfiguredError",
    "SearchUnavailableException",
    "SqlNotConfiguredException",
    "ValidationException",
]
