"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services and outbound
collaborators (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from fedsearch.application.dtos.search import Intent, SearchResult


# Language model client interface
class ILanguageModelClient(Protocol):
    """Protocol for a chat-completion provider returning a JSON object."""

    async def complete_json(self, messages: list[dict[str, str]]) -> dict[str, Any]:
        """Send messages and return the parsed JSON object from the reply.

        Raises LanguageModelError on any transport, status, or format failure.
        """


# Intent parser interface
class IIntentParser(Protocol):
    """Protocol for turning free text into an Intent. Never raises."""

    async def parse(self, query: str) -> Intent:
        """Return the structured intent for query (fallback intent on failure)."""


# Search result cache interface
class ISearchResultCache(Protocol):
    """Protocol for the (user, query) ranked result cache. Never raises."""

    async def get(self, user_id: str, query: str) -> list[SearchResult] | None:
        """Return cached ranked results or None on miss/unavailable."""

    async def put(
        self,
        user_id: str,
        query: str,
        results: list[SearchResult],
        ttl: int | None = None,
    ) -> bool:
        """Store ranked results; return True if stored."""
