"""Article search, read, update and delete endpoints.

Domain exceptions raised by the service are turned into ``{"error": ...}``
responses by the handlers in ``insight_api.presentation.api.errors``.
"""

from fastapi import APIRouter, Body, Depends, Query

from insight_api.application.schemas import (
    ArticlePageResponse,
    ArticleResponse,
    ArticleUpdate,
    BulkDeleteRequest,
    ErrorResponse,
    MessageResponse,
)
from insight_api.application.services import ArticleService, build_article_query
from insight_api.config import get_settings
from insight_api.infrastructure.dependencies import get_article_service

router = APIRouter(tags=["Articles"])

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get(
    "/search",
    response_model=ArticlePageResponse,
    responses={500: {"model": ErrorResponse}},
)
async def search_articles(
    query: str | None = Query(None, description="Case-insensitive substring of the title"),
    end_year: str | None = Query(None),
    intensity: str | None = Query(None),
    sector: str | None = Query(None),
    topic: str | None = Query(None),
    region: str | None = Query(None),
    start_year: str | None = Query(None),
    country: str | None = Query(None),
    relevance: str | None = Query(None),
    pestle: str | None = Query(None),
    source: str | None = Query(None),
    likelihood: str | None = Query(None),
    start_date: str | None = Query(None, description="Lower bound on added and published"),
    end_date: str | None = Query(None, description="Upper bound on added and published"),
    page: str | None = Query(None, description="1-based page number (default 1)"),
    limit: str | None = Query(None, description="Page size (default 20)"),
    service: ArticleService = Depends(get_article_service),
) -> ArticlePageResponse:
    """Search articles with optional filters and pagination."""
    settings = get_settings()
    article_query = build_article_query(
        {
            "query": query,
            "end_year": end_year,
            "intensity": intensity,
            "sector": sector,
            "topic": topic,
            "region": region,
            "start_year": start_year,
            "country": country,
            "relevance": relevance,
            "pestle": pestle,
            "source": source,
            "likelihood": likelihood,
            "start_date": start_date,
            "end_date": end_date,
            "page": page,
            "limit": limit,
        },
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )
    result = await service.list_articles(article_query)
    return ArticlePageResponse(
        total_records=result.total_records,
        total_pages=result.total_pages,
        current_page=result.current_page,
        articles=[ArticleResponse.model_validate(a.to_document()) for a in result.articles],
    )


@router.get("/search/{article_id}", response_model=ArticleResponse, responses=_ERRORS)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    article = await service.get_article(article_id)
    return ArticleResponse.model_validate(article.to_document())


@router.put("/edit/{article_id}", response_model=MessageResponse, responses=_ERRORS)
async def update_article(
    article_id: str,
    fields: ArticleUpdate = Body(..., examples=[{"intensity": 6, "topic": "oil"}]),
    service: ArticleService = Depends(get_article_service),
) -> MessageResponse:
    """Merge the supplied fields into an article; other fields are left untouched."""
    await service.update_article(article_id, fields)
    return MessageResponse(message="Article updated successfully")


# Declared before /search/{article_id} so "multiple" is not taken as an id.
@router.delete("/search/multiple", response_model=MessageResponse, responses=_ERRORS)
async def delete_articles(
    data: BulkDeleteRequest,
    service: ArticleService = Depends(get_article_service),
) -> MessageResponse:
    """Delete several articles by ID; unknown ids are skipped."""
    deleted = await service.delete_articles(data.ids)
    return MessageResponse(message=f"{deleted} records deleted successfully")


@router.delete("/search/{article_id}", response_model=MessageResponse, responses=_ERRORS)
async def delete_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> MessageResponse:
    """Delete an article by ID."""
    await service.delete_article(article_id)
    return MessageResponse(message="Article deleted successfully")
