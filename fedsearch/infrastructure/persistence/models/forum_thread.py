"""Forum thread ORM model."""

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fedsearch.infrastructure.persistence.database import Base
from fedsearch.infrastructure.persistence.models.mixins import ContentModel


class ForumThread(ContentModel, Base):
    """Forum thread (opening post). Table: forum_thread."""

    __tablename__ = "forum_thread"

    title: Mapped[str] = mapped_column(String, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str | None] = mapped_column(String, nullable=True)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    author_name: Mapped[str | None] = mapped_column(String, nullable=True)
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    reply_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
