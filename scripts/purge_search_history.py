"""Purge search history entries older than SEARCH_HISTORY_RETENTION_DAYS.

Usage:
    python -m scripts.purge_search_history [days]
If days is omitted, uses SEARCH_HISTORY_RETENTION_DAYS (default 90).
Requires DATABASE_URL.
"""

import asyncio
import sys
from datetime import timedelta

from fedsearch.core.config import get_settings
from fedsearch.domain.exceptions import SqlNotConfiguredException
from fedsearch.infrastructure.persistence.database import dispose_engine, get_session_factory
from fedsearch.infrastructure.persistence.repositories import SearchHistoryRepository
from fedsearch.shared.utils.datetime import utc_now


async def main() -> None:
    """Delete history rows with timestamp before now - retention days."""
    settings = get_settings()
    try:
        session_factory = get_session_factory()
    except SqlNotConfiguredException:
        print("DATABASE_URL not configured", file=sys.stderr)
        sys.exit(1)

    retention_days = int(sys.argv[1]) if len(sys.argv) > 1 else settings.search_history_retention_days
    if retention_days < 1:
        print("Retention days must be >= 1", file=sys.stderr)
        sys.exit(1)

    cutoff = utc_now() - timedelta(days=retention_days)
    repo = SearchHistoryRepository(session_factory, cap=settings.search_history_cap)
    deleted = await repo.purge_older_than(cutoff)
    await dispose_engine()
    print(f"Done. Deleted {deleted} search history entr{'y' if deleted == 1 else 'ies'} older than {cutoff.isoformat()}")


if __name__ == "__main__":
    asyncio.run(main())
