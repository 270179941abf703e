from .article_filter_builder import SEARCH_PARAMETERS, build_article_query
from .article_service import ArticleService

__all__ = [
    "SEARCH_PARAMETERS",
    "build_article_query",
    "ArticleService",
]
