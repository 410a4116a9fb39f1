"""Calendar event ORM model."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fedsearch.infrastructure.persistence.database import Base
from fedsearch.infrastructure.persistence.models.mixins import ContentModel


class Event(ContentModel, Base):
    """Calendar event. Table: event. Date filters apply to starts_at."""

    __tablename__ = "event"

    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(String, nullable=True)
    category: Mapped[str | None] = mapped_column(String, nullable=True)
    starts_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    ends_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    attendee_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
