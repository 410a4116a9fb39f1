"""Persistence repositories."""

from fedsearch.infrastructure.persistence.repositories.search_history_repo import (
    SearchHistoryRepository,
)

__all__ = ["SearchHistoryRepository"]
