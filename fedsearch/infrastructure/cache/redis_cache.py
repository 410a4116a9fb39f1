"""Redis-based cache service for search results.

Provides async Redis caching with TTL support. Every failure degrades to a
miss (get) or a no-op (set): search never fails because the cache is down.
Integrates with fedsearch.infrastructure.cache.keys for key format (DRY).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

import redis.asyncio as redis

from fedsearch.core.config import get_settings

if TYPE_CHECKING:
    from fedsearch.core.config import Settings

logger = logging.getLogger(__name__)


class CacheService:
    """Async Redis cache service with TTL support.

    Uses fedsearch.core.config for connection settings. Call connect() at
    startup and disconnect() at shutdown. With REDIS_ENABLED=false the
    service never connects and every call is a miss.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize cache service.

        Args:
            redis_client: Optional Redis client for testing or DI. A supplied
                client is treated as connected.
            settings: Optional settings; defaults to get_settings().
        """
        self.redis = redis_client
        self.settings = settings or get_settings()
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if not self.settings.redis_enabled:
            logger.info("Redis cache disabled by configuration")
            return
        if self.redis is None:
            try:
                self.redis = redis.Redis(
                    host=self.settings.redis_host,
                    port=self.settings.redis_port,
                    db=self.settings.redis_db,
                    password=self.settings.redis_password.get_secret_value() if self.settings.redis_password else None,
                    decode_responses=True,
                    socket_connect_timeout=5,
                    socket_keepalive=True,
                )
                await self.redis.ping()
                self._connected = True
                logger.info(
                    "Redis cache connected: %s:%s",
                    self.settings.redis_host,
                    self.settings.redis_port,
                )
            except (redis.ConnectionError, redis.TimeoutError) as e:
                logger.warning(
                    "Redis connection failed: %s. Search cache disabled.",
                    e,
                )
                self._connected = False
                self.redis = None

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Attempt to reconnect after disconnect. Returns True if reconnected."""
        if self.redis is None:
            return False
        try:
            await self.redis.aclose()
        except redis.RedisError:
            logger.debug("Ignoring error while closing stale Redis client")
        self.redis = None
        self._connected = False
        await self.connect()
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def _run(
        self,
        action: str,
        key: str,
        command: Callable[[redis.Redis], Awaitable[Any]],
    ) -> tuple[bool, Any]:
        """Run one command, reconnecting once on a dropped connection.

        Returns (ok, result). Errors are logged and reported as ok=False.
        """
        if not self.is_available() or self.redis is None:
            return False, None
        try:
            return True, await command(self.redis)
        except (redis.ConnectionError, redis.TimeoutError):
            if not await self._reconnect() or self.redis is None:
                logger.warning("Cache %s unavailable for key %s (Redis disconnected)", action, key)
                return False, None
        except redis.RedisError:
            logger.exception("Cache %s error for key %s", action, key)
            return False, None
        try:
            return True, await command(self.redis)
        except redis.RedisError:
            logger.exception("Cache %s error for key %s after reconnect", action, key)
            return False, None

    async def get(self, key: str) -> Any | None:
        """Return the JSON-decoded value, or None on miss, outage, or undecodable payload.

        Args:
            key: Cache key (use fedsearch.infrastructure.cache.keys builders).
        """
        ok, value = await self._run("get", key, lambda client: client.get(key))
        if not ok:
            return None
        if value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        try:
            decoded = json.loads(value)
        except ValueError:
            logger.warning("Cache payload for key %s is not valid JSON; treating as miss", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return decoded

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store a JSON-serializable value with a TTL in seconds. Returns True if stored."""
        if not self.is_available():
            return False
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError):
            logger.exception("Cache value for key %s is not JSON-serializable", key)
            return False
        ok, _ = await self._run("set", key, lambda client: client.setex(key, ttl, serialized))
        if ok:
            logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
        return ok

    async def delete(self, key: str) -> bool:
        """Remove key from cache. Returns True if the command ran."""
        ok, _ = await self._run("delete", key, lambda client: client.delete(key))
        return ok
