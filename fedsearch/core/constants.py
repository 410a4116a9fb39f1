"""Core constants: cache key prefixes and fixed search values.

Single source of truth for cache key structure and the scoring weights
used by the relevance ranker.
"""

# Cache key prefixes
CACHE_PREFIX_SEARCH = "search"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Relevance scoring
KEYWORD_MATCH_WEIGHT = 10
RECENT_WEEK_BOOST = 5
RECENT_MONTH_BOOST = 3
RECENT_WEEK_DAYS = 7
RECENT_MONTH_DAYS = 30

# Keyword tokens must be longer than this to be kept
MIN_KEYWORD_LENGTH = 3

# Popular searches look-back window
POPULAR_SEARCH_WINDOW_DAYS = 7

# Roles never surfaced by the people adapter
ADMINISTRATIVE_ROLES = frozenset({"admin", "super_admin"})

# Description snippet length for long-form content (forum posts, stories)
DESCRIPTION_SNIPPET_LENGTH = 150
