"""Application interfaces (ports) implemented by infrastructure."""

from fedsearch.application.interfaces.repositories import (
    IContentSourceAdapter,
    ISearchHistoryRepository,
)
from fedsearch.application.interfaces.services import (
    IIntentParser,
    ILanguageModelClient,
    ISearchResultCache,
)

__all__ = [
    "IContentSourceAdapter",
    "IIntentParser",
    "ILanguageModelClient",
    "ISearchHistoryRepository",
    "ISearchResultCache",
]
