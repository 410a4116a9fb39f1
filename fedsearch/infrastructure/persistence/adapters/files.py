"""Library files adapter."""

from fedsearch.application.dtos.search import SearchResult
from fedsearch.domain.enums import SourceType
from fedsearch.infrastructure.persistence.adapters.base import SqlAlchemySourceAdapter
from fedsearch.infrastructure.persistence.models.library_file import LibraryFile
from fedsearch.shared.utils.datetime import ensure_utc


class FilesAdapter(SqlAlchemySourceAdapter[LibraryFile]):
    source_type = SourceType.FILES
    model = LibraryFile
    search_fields = ("title", "file_name", "description", "tags")
    json_fields = frozenset({"tags"})
    tag_field = "tags"
    popularity_field = "download_count"

    def to_result(self, row: LibraryFile) -> SearchResult:
        return SearchResult(
            id=row.id,
            source_type=self.source_type,
            title=row.title,
            description=row.description or "",
            link=f"/library?id={row.id}",
            metadata={
                "file_name": row.file_name,
                "file_type": row.file_type,
                "category": row.category,
                "tags": list(row.tags or []),
                "download_count": row.download_count,
            },
            created_at=ensure_utc(row.created_at),
        )
