"""Person ORM model: members of the network (owners and vendors)."""

from sqlalchemy import JSON, Boolean, String, text
from sqlalchemy.orm import Mapped, mapped_column

from fedsearch.domain.enums import MemberRole
from fedsearch.infrastructure.persistence.database import Base
from fedsearch.infrastructure.persistence.models.mixins import ContentModel


class Person(ContentModel, Base):
    """Member profile. Table: person. specialties is a JSON list of strings."""

    __tablename__ = "person"

    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str | None] = mapped_column(String, nullable=True, unique=True)
    company: Mapped[str | None] = mapped_column(String, nullable=True)
    specialties: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    city: Mapped[str | None] = mapped_column(String, nullable=True)
    state: Mapped[str | None] = mapped_column(String, nullable=True)
    phone: Mapped[str | None] = mapped_column(String, nullable=True)
    role: Mapped[str] = mapped_column(
        String, nullable=False, default=MemberRole.OWNER.value, index=True
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
