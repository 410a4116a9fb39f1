"""Resolve named date buckets ("last month", "Q3") to concrete windows."""

from datetime import datetime, timedelta

from fedsearch.application.dtos.search import DateWindow


def _month_start(year: int, month: int, tz) -> datetime:
    """First instant of month; month may be 0 (previous December) or 13."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return datetime(year, month, 1, tzinfo=tz)


def resolve_date_range(bucket: str, now: datetime) -> DateWindow:
    """Return the window for a named bucket relative to now.

    Recognized (case-insensitive): last week, this week, past week, this month,
    last month, this year, q1-q4. Anything else resolves to the start of the
    current year with no upper bound.

    Args:
        bucket: Bucket name from the parsed intent.
        now: Reference instant (timezone-aware).

    Returns:
        DateWindow with inclusive start and exclusive (or open) end.
    """
    tz = now.tzinfo
    name = " ".join(bucket.strip().lower().split())
    year_start = datetime(now.year, 1, 1, tzinfo=tz)

    if name in ("last week", "this week", "past week"):
        return DateWindow(start=now - timedelta(days=7), end=now)
    if name == "this month":
        return DateWindow(start=_month_start(now.year, now.month, tz), end=now)
    if name == "last month":
        return DateWindow(
            start=_month_start(now.year, now.month - 1, tz),
            end=_month_start(now.year, now.month, tz),
        )
    if name == "this year":
        return DateWindow(start=year_start, end=now)
    if name in ("q1", "q2", "q3", "q4"):
        first_month = (int(name[1]) - 1) * 3 + 1
        return DateWindow(
            start=_month_start(now.year, first_month, tz),
            end=_month_start(now.year, first_month + 3, tz),
        )
    return DateWindow(start=year_start, end=None)
