"""Search history repository: append with per-user cap, aggregation, retention."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import delete, func, select

from fedsearch.application.dtos.search import PopularSearch
from fedsearch.application.dtos.search_history import SearchHistoryCreate, SearchHistoryEntry
from fedsearch.infrastructure.persistence.adapters.base import escape_like
from fedsearch.infrastructure.persistence.models.search_history import SearchHistory
from fedsearch.shared.utils.datetime import ensure_utc, utc_now

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


class SearchHistoryRepository:
    """ISearchHistoryRepository over SQLAlchemy.

    Takes a session factory rather than a session: writes run detached from
    the request that triggered them.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        cap: int = 100,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.session_factory = session_factory
        self.cap = cap
        self.clock = clock

    async def record_search(self, data: SearchHistoryCreate) -> None:
        """Insert an entry, then trim the user's oldest entries beyond cap (one transaction)."""
        async with self.session_factory() as session:
            async with session.begin():
                session.add(
                    SearchHistory(
                        user_id=data.user_id,
                        query=data.query,
                        timestamp=self.clock(),
                        conversation=list(data.conversation),
                        result_count=data.result_count,
                        source_types=list(data.source_types),
                        execution_time_ms=data.execution_time_ms,
                    )
                )
                await session.flush()
                total = await session.scalar(
                    select(func.count())
                    .select_from(SearchHistory)
                    .where(SearchHistory.user_id == data.user_id)
                )
                overflow = (total or 0) - self.cap
                if overflow > 0:
                    oldest = (
                        await session.scalars(
                            select(SearchHistory.id)
                            .where(SearchHistory.user_id == data.user_id)
                            .order_by(SearchHistory.timestamp.asc(), SearchHistory.id.asc())
                            .limit(overflow)
                        )
                    ).all()
                    await session.execute(
                        delete(SearchHistory).where(SearchHistory.id.in_(oldest))
                    )

    async def suggestions(self, prefix: str, limit: int = 5) -> list[str]:
        """Distinct past queries (all users) starting with prefix, most frequent first."""
        if not prefix:
            return []
        count = func.count().label("count")
        stmt = (
            select(SearchHistory.query, count)
            .where(SearchHistory.query.ilike(f"{escape_like(prefix)}%", escape="\\"))
            .group_by(SearchHistory.query)
            .order_by(count.desc(), SearchHistory.query.asc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            rows = (await session.execute(stmt)).all()
        return [row.query for row in rows]

    async def popular_searches(
        self, limit: int = 10, since: datetime | None = None
    ) -> list[PopularSearch]:
        """Most frequent query texts, optionally restricted to timestamp >= since."""
        count = func.count().label("count")
        stmt = select(SearchHistory.query, count)
        if since is not None:
            stmt = stmt.where(SearchHistory.timestamp >= since)
        stmt = (
            stmt.group_by(SearchHistory.query)
            .order_by(count.desc(), SearchHistory.query.asc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            rows = (await session.execute(stmt)).all()
        return [PopularSearch(query=row.query, count=row.count) for row in rows]

    async def recent_searches(self, user_id: str, limit: int = 10) -> list[SearchHistoryEntry]:
        """The user's entries, newest first."""
        stmt = (
            select(SearchHistory)
            .where(SearchHistory.user_id == user_id)
            .order_by(SearchHistory.timestamp.desc(), SearchHistory.id.desc())
            .limit(limit)
        )
        async with self.session_factory() as session:
            rows = (await session.scalars(stmt)).all()
        return [
            SearchHistoryEntry(
                id=row.id,
                user_id=row.user_id,
                query=row.query,
                timestamp=ensure_utc(row.timestamp),
                conversation=list(row.conversation or []),
                result_count=row.result_count,
            )
            for row in rows
        ]

    async def purge_older_than(self, cutoff: datetime) -> int:
        """Delete entries with timestamp before cutoff; return number deleted."""
        async with self.session_factory() as session:
            async with session.begin():
                result = await session.execute(
                    delete(SearchHistory).where(SearchHistory.timestamp < cutoff)
                )
        return result.rowcount or 0
