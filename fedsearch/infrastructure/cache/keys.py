"""Cache key builders. Single place for key format (DRY).

Key components (user_id) must not contain CACHE_KEY_SEP to avoid
ambiguous or colliding keys. Query text is hashed, so it may contain
anything.
"""

import hashlib
import re

from fedsearch.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_SEARCH

_WHITESPACE = re.compile(r"\s+")


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the cache key separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is empty or contains CACHE_KEY_SEP.
    """
    if not value:
        raise ValueError(f"Cache key component {name!r} must not be empty")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def normalize_query(query: str) -> str:
    """Trim, collapse internal whitespace, and lowercase."""
    return _WHITESPACE.sub(" ", query.strip()).lower()


def search_results_key(user_id: str, query: str, normalize: bool = True) -> str:
    """Cache key for a user's ranked results for one query.

    With normalize=False the raw query text is hashed, so queries differing
    only in case or spacing get separate entries.
    """
    _validate_key_component(user_id, "user_id")
    text = normalize_query(query) if normalize else query
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    return f"{CACHE_PREFIX_SEARCH}{CACHE_KEY_SEP}{user_id}{CACHE_KEY_SEP}{digest}"
