"""Search history ORM model (one row per search invocation)."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fedsearch.infrastructure.persistence.database import Base
from fedsearch.infrastructure.persistence.models.mixins import CuidMixin
from fedsearch.shared.utils.datetime import utc_now


class SearchHistory(CuidMixin, Base):
    """Search history entry. Table: search_history. Capped per user after each insert."""

    __tablename__ = "search_history"

    user_id: Mapped[str] = mapped_column(String, nullable=False)
    query: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, index=True
    )
    conversation: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list
    )
    result_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    source_types: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    execution_time_ms: Mapped[int | None] = mapped_column(Integer, nullable=True)

    __table_args__ = (
        Index("ix_search_history_user_timestamp", "user_id", "timestamp"),
    )
