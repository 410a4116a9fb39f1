"""Named date bucket resolution."""

from datetime import UTC, datetime, timedelta

import pytest

from fedsearch.application.dtos.search import DateWindow
from fedsearch.application.services.date_ranges import resolve_date_range

NOW = datetime(2025, 1, 15, 9, 0, tzinfo=UTC)


@pytest.mark.parametrize("bucket", ["last week", "This Week", "past  week"])
def test_week_buckets_cover_last_seven_days(bucket: str) -> None:
    assert resolve_date_range(bucket, NOW) == DateWindow(start=NOW - timedelta(days=7), end=NOW)


def test_this_month() -> None:
    assert resolve_date_range("this month", NOW) == DateWindow(
        start=datetime(2025, 1, 1, tzinfo=UTC), end=NOW
    )


def test_last_month_crosses_year_boundary() -> None:
    assert resolve_date_range("last month", NOW) == DateWindow(
        start=datetime(2024, 12, 1, tzinfo=UTC),
        end=datetime(2025, 1, 1, tzinfo=UTC),
    )


def test_this_year() -> None:
    assert resolve_date_range("this year", NOW) == DateWindow(
        start=datetime(2025, 1, 1, tzinfo=UTC), end=NOW
    )


@pytest.mark.parametrize(
    ("bucket", "start", "end"),
    [
        ("Q1", datetime(2025, 1, 1, tzinfo=UTC), datetime(2025, 4, 1, tzinfo=UTC)),
        ("q3", datetime(2025, 7, 1, tzinfo=UTC), datetime(2025, 10, 1, tzinfo=UTC)),
        ("Q4", datetime(2025, 10, 1, tzinfo=UTC), datetime(2026, 1, 1, tzinfo=UTC)),
    ],
)
def test_quarters(bucket: str, start: datetime, end: datetime) -> None:
    assert resolve_date_range(bucket, NOW) == DateWindow(start=start, end=end)


def test_unknown_bucket_is_start_of_year_open_ended() -> None:
    assert resolve_date_range("since the rebrand", NOW) == DateWindow(
        start=datetime(2025, 1, 1, tzinfo=UTC), end=None
    )
