"""Application service (use case) for Article operations."""

import logging
import math
from typing import Any

from insight_api.application.interfaces import ArticleRepository
from insight_api.domain.entities import Article, ArticlePage, ArticleQuery
from insight_api.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    InvalidIdentifierError,
)

logger = logging.getLogger(__name__)

_IMMUTABLE_FIELDS = frozenset({"id", "_id"})


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Identifiers are always validated before the repository is touched, so a
    malformed id never reaches the store.
    """

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def list_articles(self, query: ArticleQuery) -> ArticlePage:
        pagination = query.pagination
        total = await self._repository.count(query.filter)
        articles = await self._repository.find(
            query.filter, skip=pagination.skip, limit=pagination.limit
        )
        return ArticlePage(
            total_records=total,
            total_pages=math.ceil(total / pagination.limit),
            current_page=pagination.page,
            articles=articles,
        )

    async def get_article(self, article_id: str) -> Article:
        self._validate_ids([article_id])
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def update_article(self, article_id: str, fields: dict[str, Any]) -> None:
        """Merge ``fields`` into the article; untouched keys keep their values.

        Field names and value types are not validated beyond protecting the id.
        """
        self._validate_ids([article_id])
        if not fields:
            raise InvalidArgumentError("No fields supplied to update")
        protected = sorted(_IMMUTABLE_FIELDS & fields.keys())
        if protected:
            raise InvalidArgumentError(f"Field(s) {', '.join(protected)} cannot be updated")

        if not await self._repository.update_fields(article_id, fields):
            raise EntityNotFoundError("Article", article_id)
        logger.info("Updated article %s (%d field(s))", article_id, len(fields))

    async def delete_article(self, article_id: str) -> None:
        self._validate_ids([article_id])
        if not await self._repository.delete(article_id):
            raise EntityNotFoundError("Article", article_id)
        logger.info("Deleted article %s", article_id)

    async def delete_articles(self, article_ids: list[str]) -> int:
        """Delete a batch of articles; the whole batch is rejected if any id is malformed."""
        if not article_ids:
            raise InvalidArgumentError("No article ids supplied")
        self._validate_ids(article_ids)
        deleted = await self._repository.delete_many(article_ids)
        logger.info("Deleted %d of %d requested articles", deleted, len(article_ids))
        return deleted

    def _validate_ids(self, article_ids: list[str]) -> None:
        invalid = [i for i in article_ids if not self._repository.is_valid_id(i)]
        if invalid:
            raise InvalidIdentifierError("Article", invalid)
