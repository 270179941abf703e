"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from typing import Any

from insight_api.domain.entities import Article, ArticleFilter


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Implementations raise ``RepositoryError`` when the store fails.
    """

    @abstractmethod
    def is_valid_id(self, article_id: str) -> bool:
        """Return True if ``article_id`` is a well-formed identifier for this store."""
        ...

    @abstractmethod
    async def count(self, article_filter: ArticleFilter) -> int:
        """Count articles matching the filter."""
        ...

    @abstractmethod
    async def find(self, article_filter: ArticleFilter, skip: int = 0, limit: int = 20) -> list[Article]:
        """Retrieve one page of matching articles in store-default order."""
        ...

    @abstractmethod
    async def get_by_id(self, article_id: str) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def update_fields(self, article_id: str, fields: dict[str, Any]) -> bool:
        """Merge ``fields`` into an article. Returns True if a document matched."""
        ...

    @abstractmethod
    async def delete(self, article_id: str) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def delete_many(self, article_ids: list[str]) -> int:
        """Delete every listed article that exists. Returns the number deleted."""
        ...
