"""Domain enumerations for federated search.

Enums represent fixed sets of domain values (content source types, sort
preferences, member roles). Declaration order of SourceType is the
concatenation order used when merging adapter results.
"""

from enum import Enum


# Language-model and legacy spellings mapped to canonical source type values.
_SOURCE_TYPE_ALIASES: dict[str, str] = {
    "file": "files",
    "library": "files",
    "documents": "files",
    "owners": "people",
    "owner": "people",
    "person": "people",
    "users": "people",
    "event": "events",
    "calendar": "events",
    "forum": "forumPosts",
    "forumposts": "forumPosts",
    "forum_posts": "forumPosts",
    "posts": "forumPosts",
    "threads": "forumPosts",
    "story": "stories",
    "brags": "stories",
    "video": "videos",
    "supplier": "suppliers",
    "partners": "suppliers",
    "vendors": "suppliers",
}


class SourceType(str, Enum):
    """Content store searched by one adapter."""

    FILES = "files"
    PEOPLE = "people"
    EVENTS = "events"
    FORUM_POSTS = "forumPosts"
    STORIES = "stories"
    VIDEOS = "videos"
    EQUIPMENT = "equipment"
    SUPPLIERS = "suppliers"

    @classmethod
    def coerce(cls, raw: object) -> "SourceType | None":
        """Map a loosely spelled value (e.g. 'owners', 'Forum') to a SourceType.

        Returns None for unknown or non-string values.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        value = raw.strip()
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        alias = _SOURCE_TYPE_ALIASES.get(value.lower())
        return cls(alias) if alias else None

    @classmethod
    def all(cls) -> frozenset["SourceType"]:
        """Return every source type (used when intent is unknown)."""
        return frozenset(cls)


class SortPreference(str, Enum):
    """How adapters should order store rows before post-hoc scoring."""

    RELEVANCE = "relevance"
    RECENCY = "recency"
    POPULARITY = "popularity"

    @classmethod
    def coerce(cls, raw: object) -> "SortPreference":
        """Map a model-provided sort value to a SortPreference; default relevance."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return cls.RELEVANCE
        value = raw.strip().lower()
        if value in ("recency", "date", "newest", "recent", "latest"):
            return cls.RECENCY
        if value in ("popularity", "popular", "views", "most viewed"):
            return cls.POPULARITY
        return cls.RELEVANCE


class MemberRole(str, Enum):
    """Role of a person record in the people store."""

    OWNER = "owner"
    VENDOR = "vendor"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"
