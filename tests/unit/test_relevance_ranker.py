"""Relevance ranker: score law, stable ordering, and caps."""

from datetime import UTC, datetime, timedelta

from fedsearch.application.dtos.search import Intent, SearchResult
from fedsearch.application.services.relevance_ranker import (
    rank,
    recency_boost,
    result_text_blob,
    score_result,
)
from fedsearch.domain.enums import SourceType

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


def _result(
    id_: str,
    title: str = "",
    created_at: datetime | None = None,
    source_type: SourceType = SourceType.FORUM_POSTS,
    description: str = "",
    metadata: dict | None = None,
) -> SearchResult:
    return SearchResult(
        id=id_,
        source_type=source_type,
        title=title,
        description=description,
        link=f"/x/{id_}",
        metadata=metadata or {},
        created_at=created_at,
    )


def _intent(*keywords: str) -> Intent:
    return Intent(source_types=SourceType.all(), keywords=keywords)


class TestRecencyBoost:
    def test_buckets_are_not_cumulative(self) -> None:
        assert recency_boost(NOW - timedelta(days=1), NOW) == 5
        assert recency_boost(NOW - timedelta(days=10), NOW) == 3
        assert recency_boost(NOW - timedelta(days=45), NOW) == 0

    def test_missing_timestamp_counts_as_epoch(self) -> None:
        assert recency_boost(None, NOW) == 0

    def test_future_timestamp_gets_week_boost(self) -> None:
        assert recency_boost(NOW + timedelta(days=3), NOW) == 5

    def test_naive_timestamp_treated_as_utc(self) -> None:
        assert recency_boost(datetime(2025, 5, 30, 12, 0), NOW) == 5


class TestScoreLaw:
    def test_all_keywords_created_today(self) -> None:
        keywords = ("vinyl", "wrap", "fleet")
        result = _result("1", title="Fleet vinyl wrap guide", created_at=NOW)
        assert score_result(result, keywords, NOW) == 10 * len(keywords) + 5

    def test_no_keywords_old_result_scores_zero(self) -> None:
        result = _result("1", title="Unrelated", created_at=NOW - timedelta(days=31))
        assert score_result(result, ("vinyl",), NOW) == 0

    def test_presence_not_frequency(self) -> None:
        result = _result("1", title="vinyl vinyl vinyl", description="vinyl")
        assert score_result(result, ("vinyl", "vinyl"), NOW) == 10

    def test_keywords_match_metadata_values_case_insensitively(self) -> None:
        result = _result("1", title="Untitled", metadata={"author": "Dana BRIGHT"})
        assert score_result(result, ("bright",), NOW) == 10

    def test_field_names_are_not_matched(self) -> None:
        result = _result("1", title="Untitled", metadata={"category": None})
        assert "category" not in result_text_blob(result)
        assert score_result(result, ("category",), NOW) == 0


def test_led_scenario_recent_post_beats_older_exact_match() -> None:
    """Recent post with all 4 keywords (45) ranks above a 6-month-old one (40)."""
    old = _result(
        "old", title="LED Sign Installation Safety", created_at=NOW - timedelta(days=180)
    )
    recent = _result(
        "recent", title="LED Sign Installation Safety", created_at=NOW - timedelta(days=1)
    )
    ranked = rank([old, recent], _intent("led", "sign", "installation", "safety"), now=NOW)
    assert [(r.id, r.score) for r in ranked] == [("recent", 45), ("old", 40)]


def test_rank_is_stable_and_deterministic() -> None:
    """Equal scores keep input order; repeated calls give identical output."""
    results = [_result(str(i), title="sign") for i in range(6)]
    intent = _intent("sign")
    first = rank(results, intent, now=NOW)
    second = rank(results, intent, now=NOW)
    assert [r.id for r in first] == [str(i) for i in range(6)]
    assert first == second


def test_rank_does_not_mutate_input() -> None:
    original = _result("1", title="sign", created_at=NOW)
    rank([original], _intent("sign"), now=NOW)
    assert original.score == 0


def test_rank_truncates_to_limit() -> None:
    results = [_result(str(i), title="sign") for i in range(35)]
    assert len(rank(results, _intent("sign"), now=NOW)) == 20
    assert len(rank(results, _intent("sign"), now=NOW, limit=5)) == 5


def test_rank_empty_input() -> None:
    assert rank([], _intent("sign"), now=NOW) == []
