"""People adapter: member profiles, excluding administrative accounts."""

from sqlalchemy import ColumnElement

from fedsearch.application.dtos.search import Intent, SearchResult
from fedsearch.core.constants import ADMINISTRATIVE_ROLES
from fedsearch.domain.enums import SourceType
from fedsearch.infrastructure.persistence.adapters.base import SqlAlchemySourceAdapter
from fedsearch.infrastructure.persistence.models.person import Person
from fedsearch.shared.utils.datetime import ensure_utc


class PeopleAdapter(SqlAlchemySourceAdapter[Person]):
    """Searches active, non-administrative people by name, company, specialty, and place."""

    source_type = SourceType.PEOPLE
    model = Person
    search_fields = ("name", "company", "specialties", "city", "state")
    json_fields = frozenset({"specialties"})

    def extra_conditions(self, intent: Intent) -> list[ColumnElement[bool]]:
        conditions = [
            Person.role.not_in(sorted(ADMINISTRATIVE_ROLES)),
            Person.is_active.is_(True),
        ]
        if intent.filters.location:
            conditions.append(self.location_condition(intent.filters.location, "city", "state"))
        return conditions

    def to_result(self, row: Person) -> SearchResult:
        return SearchResult(
            id=row.id,
            source_type=self.source_type,
            title=row.name,
            description=f"{row.company or ''} - {row.city or ''}, {row.state or ''}",
            link=f"/owners/{row.id}",
            metadata={
                "company": row.company,
                "city": row.city,
                "state": row.state,
                "specialties": list(row.specialties or []),
                "role": row.role,
            },
            created_at=ensure_utc(row.created_at),
        )
