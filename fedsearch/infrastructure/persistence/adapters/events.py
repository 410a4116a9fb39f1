"""Calendar events adapter. Date and location filters apply here."""

from sqlalchemy import ColumnElement

from fedsearch.application.dtos.search import Intent, SearchResult
from fedsearch.domain.enums import SourceType
from fedsearch.infrastructure.persistence.adapters.base import SqlAlchemySourceAdapter
from fedsearch.infrastructure.persistence.models.event import Event
from fedsearch.shared.utils.datetime import ensure_utc, to_iso


class EventsAdapter(SqlAlchemySourceAdapter[Event]):
    source_type = SourceType.EVENTS
    model = Event
    search_fields = ("title", "description", "location")
    popularity_field = "attendee_count"

    def extra_conditions(self, intent: Intent) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []
        window = intent.filters.date_range
        if window is not None:
            conditions.append(Event.starts_at >= window.start)
            if window.end is not None:
                conditions.append(Event.starts_at < window.end)
        if intent.filters.location:
            conditions.append(self.location_condition(intent.filters.location, "location"))
        return conditions

    def to_result(self, row: Event) -> SearchResult:
        return SearchResult(
            id=row.id,
            source_type=self.source_type,
            title=row.title,
            description=row.description or "",
            link=f"/calendar?id={row.id}",
            metadata={
                "location": row.location,
                "category": row.category,
                "starts_at": to_iso(row.starts_at),
                "ends_at": to_iso(row.ends_at),
                "attendee_count": row.attendee_count,
            },
            created_at=ensure_utc(row.created_at),
        )
