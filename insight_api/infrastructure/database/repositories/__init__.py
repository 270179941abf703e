from .article_repository import MongoArticleRepository, to_json_safe, to_mongo_query

__all__ = [
    "MongoArticleRepository",
    "to_json_safe",
    "to_mongo_query",
]
