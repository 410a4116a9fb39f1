"""Library file ORM model (shared documents, templates, artwork)."""

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fedsearch.infrastructure.persistence.database import Base
from fedsearch.infrastructure.persistence.models.mixins import ContentModel


class LibraryFile(ContentModel, Base):
    """Library file. Table: library_file. tags is a JSON list of strings."""

    __tablename__ = "library_file"

    title: Mapped[str] = mapped_column(String, nullable=False)
    file_name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(String, nullable=True)
    file_type: Mapped[str | None] = mapped_column(String, nullable=True)
    file_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    uploaded_by: Mapped[str | None] = mapped_column(String, nullable=True)
    download_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
