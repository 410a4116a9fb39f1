"""Pytest configuration and fixtures for fedsearch.

Environment is set before fedsearch.main is imported so create_app() sees
test settings: no Redis, no SQL database, no language-model key. HTTP tests
override dependencies; persistence tests use a file-backed SQLite database
(aiosqlite) per test.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["REDIS_ENABLED"] = "false"
os.environ["DATABASE_URL"] = ""
os.environ["OPENROUTER_API_KEY"] = ""

from collections.abc import AsyncIterator  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from fedsearch.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from fedsearch.core.limiter import limiter  # noqa: E402
from fedsearch.infrastructure.persistence.database import Base, json_serializer  # noqa: E402
import fedsearch.infrastructure.persistence.models  # noqa: E402,F401
from fedsearch.infrastructure.security.jwt import create_access_token  # noqa: E402
from fedsearch.main import app  # noqa: E402

TEST_USER_ID = "user-test-1"


@pytest.fixture(autouse=True)
def _reset_rate_limits() -> None:
    """Rate limit counters are process-wide; start each test from zero."""
    limiter.reset()


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI). Clears dependency overrides after."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Bearer token for TEST_USER_ID."""
    token = create_access_token({"sub": TEST_USER_ID})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def session_factory(tmp_path) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Session factory on a fresh SQLite database with all tables created.

    File-backed so concurrent sessions (adapter fan-out) get separate connections.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'fedsearch.db'}", json_serializer=json_serializer
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    yield factory
    await engine.dispose()
