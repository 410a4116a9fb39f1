"""Equipment catalogue ORM model."""

from sqlalchemy import Boolean, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fedsearch.infrastructure.persistence.database import Base
from fedsearch.infrastructure.persistence.models.mixins import ContentModel


class Equipment(ContentModel, Base):
    """Equipment item. Table: equipment."""

    __tablename__ = "equipment"

    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    brand: Mapped[str | None] = mapped_column(String, nullable=True)
    category: Mapped[str | None] = mapped_column(String, nullable=True)
    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    in_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
