from .article import Article, ArticlePage
from .query import (
    DATE_RANGE_FIELDS,
    ArticleFilter,
    ArticleQuery,
    DateRange,
    Pagination,
)

__all__ = [
    "Article",
    "ArticlePage",
    "DATE_RANGE_FIELDS",
    "ArticleFilter",
    "ArticleQuery",
    "DateRange",
    "Pagination",
]
