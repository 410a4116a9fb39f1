"""Content source adapters: one per SourceType, all read-only."""

from fedsearch.infrastructure.persistence.adapters.base import (
    SqlAlchemySourceAdapter,
    escape_like,
    snippet,
)
from fedsearch.infrastructure.persistence.adapters.equipment import EquipmentAdapter
from fedsearch.infrastructure.persistence.adapters.events import EventsAdapter
from fedsearch.infrastructure.persistence.adapters.files import FilesAdapter
from fedsearch.infrastructure.persistence.adapters.forum_posts import ForumPostsAdapter
from fedsearch.infrastructure.persistence.adapters.people import PeopleAdapter
from fedsearch.infrastructure.persistence.adapters.registry import build_default_adapters
from fedsearch.infrastructure.persistence.adapters.stories import StoriesAdapter
from fedsearch.infrastructure.persistence.adapters.suppliers import SuppliersAdapter
from fedsearch.infrastructure.persistence.adapters.videos import VideosAdapter

__all__ = [
    "EquipmentAdapter",
    "EventsAdapter",
    "FilesAdapter",
    "ForumPostsAdapter",
    "PeopleAdapter",
    "SqlAlchemySourceAdapter",
    "StoriesAdapter",
    "SuppliersAdapter",
    "VideosAdapter",
    "build_default_adapters",
    "escape_like",
    "snippet",
]
