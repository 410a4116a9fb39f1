"""Equipment catalogue adapter. No popularity column: popularity sorts by recency."""

from fedsearch.application.dtos.search import SearchResult
from fedsearch.domain.enums import SourceType
from fedsearch.infrastructure.persistence.adapters.base import SqlAlchemySourceAdapter
from fedsearch.infrastructure.persistence.models.equipment import Equipment
from fedsearch.shared.utils.datetime import ensure_utc


class EquipmentAdapter(SqlAlchemySourceAdapter[Equipment]):
    source_type = SourceType.EQUIPMENT
    model = Equipment
    search_fields = ("name", "description", "brand", "category")

    def to_result(self, row: Equipment) -> SearchResult:
        return SearchResult(
            id=row.id,
            source_type=self.source_type,
            title=row.name,
            description=row.description or "",
            link=f"/equipment/{row.id}",
            metadata={
                "brand": row.brand,
                "category": row.category,
                "price": row.price,
                "in_stock": row.in_stock,
            },
            created_at=ensure_utc(row.created_at),
        )
