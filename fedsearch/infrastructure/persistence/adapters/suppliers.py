"""Suppliers adapter."""

from fedsearch.application.dtos.search import SearchResult
from fedsearch.domain.enums import SourceType
from fedsearch.infrastructure.persistence.adapters.base import SqlAlchemySourceAdapter
from fedsearch.infrastructure.persistence.models.supplier import Supplier
from fedsearch.shared.utils.datetime import ensure_utc


class SuppliersAdapter(SqlAlchemySourceAdapter[Supplier]):
    source_type = SourceType.SUPPLIERS
    model = Supplier
    search_fields = ("name", "description", "category")

    def to_result(self, row: Supplier) -> SearchResult:
        return SearchResult(
            id=row.id,
            source_type=self.source_type,
            title=row.name,
            description=row.description or "",
            link=f"/partners?id={row.id}",
            metadata={
                "category": row.category,
                "website": row.website,
            },
            created_at=ensure_utc(row.created_at),
        )
