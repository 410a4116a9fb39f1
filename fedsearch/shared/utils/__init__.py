"""Shared utilities: datetime and generators."""

from fedsearch.shared.utils.datetime import (
    EPOCH,
    ensure_utc,
    parse_iso,
    to_iso,
    utc_now,
)
from fedsearch.shared.utils.generators import generate_cuid

__all__ = [
    "EPOCH",
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "parse_iso",
    "to_iso",
]
