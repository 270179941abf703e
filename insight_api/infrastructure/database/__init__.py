from .client import (
    close_mongo_client,
    get_article_collection,
    get_mongo_client,
    ping_database,
)

__all__ = [
    "close_mongo_client",
    "get_article_collection",
    "get_mongo_client",
    "ping_database",
]
