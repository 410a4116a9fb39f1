"""Videos adapter."""

from fedsearch.application.dtos.search import SearchResult
from fedsearch.domain.enums import SourceType
from fedsearch.infrastructure.persistence.adapters.base import SqlAlchemySourceAdapter
from fedsearch.infrastructure.persistence.models.video import Video
from fedsearch.shared.utils.datetime import ensure_utc


class VideosAdapter(SqlAlchemySourceAdapter[Video]):
    source_type = SourceType.VIDEOS
    model = Video
    search_fields = ("title", "description", "tags")
    json_fields = frozenset({"tags"})
    tag_field = "tags"
    popularity_field = "views"

    def to_result(self, row: Video) -> SearchResult:
        return SearchResult(
            id=row.id,
            source_type=self.source_type,
            title=row.title,
            description=row.description or "",
            link=f"/videos?id={row.id}",
            metadata={
                "category": row.category,
                "tags": list(row.tags or []),
                "duration": row.duration,
                "views": row.views,
            },
            created_at=ensure_utc(row.created_at),
        )
