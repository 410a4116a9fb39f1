"""Forum threads adapter."""

from fedsearch.application.dtos.search import SearchResult
from fedsearch.domain.enums import SourceType
from fedsearch.infrastructure.persistence.adapters.base import SqlAlchemySourceAdapter, snippet
from fedsearch.infrastructure.persistence.models.forum_thread import ForumThread
from fedsearch.shared.utils.datetime import ensure_utc


class ForumPostsAdapter(SqlAlchemySourceAdapter[ForumThread]):
    source_type = SourceType.FORUM_POSTS
    model = ForumThread
    search_fields = ("title", "content", "tags")
    json_fields = frozenset({"tags"})
    tag_field = "tags"
    popularity_field = "views"

    def to_result(self, row: ForumThread) -> SearchResult:
        return SearchResult(
            id=row.id,
            source_type=self.source_type,
            title=row.title,
            description=snippet(row.content),
            link=f"/forum/thread/{row.id}",
            metadata={
                "author": row.author_name,
                "category": row.category,
                "tags": list(row.tags or []),
                "views": row.views,
                "replies": row.reply_count,
            },
            created_at=ensure_utc(row.created_at),
        )
