"""Persistence: database session management, ORM models, adapters, repositories."""

from fedsearch.infrastructure.persistence.database import (
    Base,
    dispose_engine,
    get_session_factory,
)

__all__ = ["Base", "dispose_engine", "get_session_factory"]
