"""Default adapter set: one adapter per SourceType."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fedsearch.infrastructure.persistence.adapters.base import SqlAlchemySourceAdapter
from fedsearch.infrastructure.persistence.adapters.equipment import EquipmentAdapter
from fedsearch.infrastructure.persistence.adapters.events import EventsAdapter
from fedsearch.infrastructure.persistence.adapters.files import FilesAdapter
from fedsearch.infrastructure.persistence.adapters.forum_posts import ForumPostsAdapter
from fedsearch.infrastructure.persistence.adapters.people import PeopleAdapter
from fedsearch.infrastructure.persistence.adapters.stories import StoriesAdapter
from fedsearch.infrastructure.persistence.adapters.suppliers import SuppliersAdapter
from fedsearch.infrastructure.persistence.adapters.videos import VideosAdapter

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

ADAPTER_CLASSES: tuple[type[SqlAlchemySourceAdapter], ...] = (
    FilesAdapter,
    PeopleAdapter,
    EventsAdapter,
    ForumPostsAdapter,
    StoriesAdapter,
    VideosAdapter,
    EquipmentAdapter,
    SuppliersAdapter,
)


def build_default_adapters(
    session_factory: async_sessionmaker[AsyncSession],
    limit: int = 10,
) -> list[SqlAlchemySourceAdapter]:
    """Instantiate every content source adapter on one session factory."""
    return [cls(session_factory, limit=limit) for cls in ADAPTER_CLASSES]
