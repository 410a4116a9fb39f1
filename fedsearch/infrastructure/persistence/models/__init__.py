"""Persistence models: ORM entities and mixins."""

from fedsearch.infrastructure.persistence.models.equipment import Equipment
from fedsearch.infrastructure.persistence.models.event import Event
from fedsearch.infrastructure.persistence.models.forum_thread import ForumThread
from fedsearch.infrastructure.persistence.models.library_file import LibraryFile
from fedsearch.infrastructure.persistence.models.mixins import (
    ContentModel,
    CuidMixin,
    TimestampMixin,
)
from fedsearch.infrastructure.persistence.models.person import Person
from fedsearch.infrastructure.persistence.models.search_history import SearchHistory
from fedsearch.infrastructure.persistence.models.story import Story
from fedsearch.infrastructure.persistence.models.supplier import Supplier
from fedsearch.infrastructure.persistence.models.video import Video

__all__ = [
    "ContentModel",
    "CuidMixin",
    "Equipment",
    "Event",
    "ForumThread",
    "LibraryFile",
    "Person",
    "SearchHistory",
    "Story",
    "Supplier",
    "TimestampMixin",
    "Video",
]
