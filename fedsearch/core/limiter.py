"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from fedsearch.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def _search_limit() -> str:
    """Resolved per request so SEARCH_RATE_LIMIT is read after settings load."""
    return get_settings().search_rate_limit


limit_search = limiter.limit(_search_limit)
