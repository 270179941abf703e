"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from pymongo.asynchronous.collection import AsyncCollection

from insight_api.application.interfaces import ArticleRepository
from insight_api.application.services import ArticleService
from insight_api.infrastructure.database import get_article_collection
from insight_api.infrastructure.database.repositories import MongoArticleRepository


async def get_article_repository(
    collection: AsyncCollection = Depends(get_article_collection),
) -> AsyncGenerator[ArticleRepository, None]:
    """Provides the MongoDB-backed article repository."""
    yield MongoArticleRepository(collection)


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    yield ArticleService(repository)
