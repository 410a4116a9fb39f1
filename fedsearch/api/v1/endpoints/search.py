"""Search API: federated natural-language search, suggestions, popular and recent searches."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from fedsearch.api.v1.dependencies import get_current_user_id, get_search_service
from fedsearch.application.dtos.search import ConversationTurn, SearchResult
from fedsearch.application.use_cases.search import SearchService
from fedsearch.core.limiter import limit_search
from fedsearch.schemas.search import (
    PopularSearchesResponse,
    PopularSearchResponse,
    RecentSearchesResponse,
    RecentSearchResponse,
    SearchRequest,
    SearchResponse,
    SearchResultResponse,
    SuggestionsResponse,
)

router = APIRouter()


def _to_response(query: str, results: list[SearchResult]) -> SearchResponse:
    return SearchResponse(
        query=query,
        count=len(results),
        results=[
            SearchResultResponse(
                id=r.id,
                source_type=r.source_type,
                title=r.title,
                description=r.description,
                link=r.link,
                metadata=r.metadata,
                created_at=r.created_at,
                score=r.score,
            )
            for r in results
        ],
    )


@router.get("", response_model=SearchResponse)
@limit_search
async def search(
    request: Request,
    user_id: Annotated[str, Depends(get_current_user_id)],
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query(..., min_length=1, max_length=500, description="Natural-language query"),
):
    """Search every content store for q; at most 20 ranked results."""
    results = await search_svc.perform_search(q, user_id)
    return _to_response(q, results)


@router.post("", response_model=SearchResponse)
@limit_search
async def conversational_search(
    request: Request,
    body: SearchRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    search_svc: Annotated[SearchService, Depends(get_search_service)],
):
    """Search with prior conversation turns (recorded in history with the query)."""
    conversation = [
        ConversationTurn(role=t.role, content=t.content, timestamp=t.timestamp)
        for t in body.conversation
    ]
    results = await search_svc.perform_search(body.query, user_id, conversation=conversation)
    return _to_response(body.query, results)


@router.get("/suggestions", response_model=SuggestionsResponse)
@limit_search
async def suggestions(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    prefix: str = Query("", max_length=200),
    limit: int = Query(5, ge=1, le=20),
):
    """Past queries (all users) starting with prefix, most frequent first."""
    return SuggestionsResponse(
        suggestions=await search_svc.get_suggestions(prefix, limit=limit)
    )


@router.get("/popular", response_model=PopularSearchesResponse)
@limit_search
async def popular_searches(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    limit: int = Query(10, ge=1, le=50),
):
    """Most frequent queries over the last 7 days."""
    items = await search_svc.get_popular_searches(limit=limit)
    return PopularSearchesResponse(
        searches=[PopularSearchResponse(query=p.query, count=p.count) for p in items]
    )


@router.get("/recent", response_model=RecentSearchesResponse)
@limit_search
async def recent_searches(
    request: Request,
    user_id: Annotated[str, Depends(get_current_user_id)],
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    limit: int = Query(10, ge=1, le=100),
):
    """The caller's own searches, newest first."""
    entries = await search_svc.get_recent_searches(user_id, limit=limit)
    return RecentSearchesResponse(
        searches=[
            RecentSearchResponse(
                query=e.query,
                timestamp=e.timestamp,
                conversation=e.conversation,
                result_count=e.result_count,
            )
            for e in entries
        ]
    )
