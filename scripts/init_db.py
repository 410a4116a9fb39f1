"""Create all tables (content stores and search history) from the ORM models.

Usage:
    python -m scripts.init_db
Requires DATABASE_URL. Existing tables are left untouched.
"""

import asyncio
import sys

import fedsearch.infrastructure.persistence.database as database
import fedsearch.infrastructure.persistence.models  # noqa: F401  (register tables on Base)
from fedsearch.domain.exceptions import SqlNotConfiguredException


async def main() -> None:
    try:
        database.get_session_factory()
    except SqlNotConfiguredException:
        print("DATABASE_URL not configured", file=sys.stderr)
        sys.exit(1)
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.create_all)
    tables = ", ".join(sorted(database.Base.metadata.tables))
    await database.dispose_engine()
    print(f"Done. Tables ensured: {tables}")


if __name__ == "__main__":
    asyncio.run(main())
