"""Base content source adapter: Intent to a read-only SQLAlchemy select.

Each adapter opens its own session from the injected session factory, so
adapters can run concurrently during fan-out.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from sqlalchemy import String, cast, or_, select

from fedsearch.core.constants import DESCRIPTION_SNIPPET_LENGTH
from fedsearch.domain.enums import SortPreference, SourceType
from fedsearch.infrastructure.persistence.database import Base

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from fedsearch.application.dtos.search import Intent, SearchResult

_LIKE_ESCAPE = "\\"

ModelType = TypeVar("ModelType", bound=Base)


def escape_like(value: str) -> str:
    """Escape LIKE wildcards % and _ (and the escape char) so value matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def snippet(text: str | None, length: int = DESCRIPTION_SNIPPET_LENGTH) -> str:
    """First length characters of text followed by '...' (empty text gives '')."""
    if not text:
        return ""
    return f"{text[:length]}..."


class SqlAlchemySourceAdapter(ABC, Generic[ModelType]):
    """Adapter over one ORM model. Subclasses declare fields and map rows to results.

    Class attributes:
        source_type: SourceType served by this adapter.
        model: ORM model queried.
        search_fields: Columns matched against every keyword (OR).
        json_fields: Subset of search_fields stored as JSON lists; matched on their text form.
        tag_field: JSON list column used for the tags filter, or None.
        popularity_field: Column for popularity sort, or None (falls back to recency).
    """

    source_type: ClassVar[SourceType]
    model: ClassVar[type[Any]]
    search_fields: ClassVar[tuple[str, ...]]
    json_fields: ClassVar[frozenset[str]] = frozenset()
    tag_field: ClassVar[str | None] = None
    popularity_field: ClassVar[str | None] = None

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        limit: int = 10,
    ) -> None:
        self.session_factory = session_factory
        self.limit = limit

    async def search(self, intent: Intent) -> list[SearchResult]:
        """Return at most limit results matching intent, in store order."""
        stmt = select(self.model)
        conditions = self._conditions(intent)
        if conditions:
            stmt = stmt.where(*conditions)
        stmt = stmt.order_by(*self._order_by(intent.sort_preference)).limit(self.limit)
        async with self.session_factory() as session:
            rows = (await session.scalars(stmt)).all()
        return [self.to_result(row) for row in rows]

    def _column(self, name: str) -> Any:
        return getattr(self.model, name)

    def _text_column(self, name: str) -> Any:
        column = self._column(name)
        return cast(column, String) if name in self.json_fields else column

    def _conditions(self, intent: Intent) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []
        keyword_match = self._keyword_condition(intent.keywords)
        if keyword_match is not None:
            conditions.append(keyword_match)
        tag_match = self._tag_condition(intent.filters.tags)
        if tag_match is not None:
            conditions.append(tag_match)
        conditions.extend(self.extra_conditions(intent))
        return conditions

    def _keyword_condition(self, keywords: tuple[str, ...]) -> ColumnElement[bool] | None:
        """OR of (field ILIKE %kw%) over every keyword and searchable field."""
        clauses = [
            self._text_column(name).ilike(f"%{escape_like(kw)}%", escape=_LIKE_ESCAPE)
            for kw in keywords
            for name in self.search_fields
        ]
        return or_(*clauses) if clauses else None

    def _tag_condition(self, tags: frozenset[str]) -> ColumnElement[bool] | None:
        """Row matches if any requested tag is an element of the JSON tag list."""
        if self.tag_field is None or not tags:
            return None
        column = cast(self._column(self.tag_field), String)
        return or_(
            *(
                column.ilike(f'%"{escape_like(tag)}"%', escape=_LIKE_ESCAPE)
                for tag in sorted(tags)
            )
        )

    def location_condition(self, location: str, *fields: str) -> ColumnElement[bool]:
        """Substring match of location against any of fields (case-insensitive)."""
        pattern = f"%{escape_like(location)}%"
        return or_(*(self._column(f).ilike(pattern, escape=_LIKE_ESCAPE) for f in fields))

    def extra_conditions(self, intent: Intent) -> list[ColumnElement[bool]]:
        """Source-specific filters (location, date range, visibility). None by default."""
        return []

    def _order_by(self, sort: SortPreference) -> list[Any]:
        created = self._column("created_at")
        newest_first = [created.desc(), self._column("id").asc()]
        if sort is SortPreference.POPULARITY and self.popularity_field:
            return [self._column(self.popularity_field).desc(), *newest_first]
        return newest_first

    @abstractmethod
    def to_result(self, row: ModelType) -> SearchResult:
        """Map one row to a normalized SearchResult."""
