"""MongoDB client and collection handles.

A single ``AsyncMongoClient`` is created lazily per process and shared by
every request; the driver owns connection pooling.
"""

import logging
from functools import lru_cache

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from insight_api.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_mongo_client() -> AsyncMongoClient:
    """Cached client. No network I/O happens until the first operation."""
    settings = get_settings()
    return AsyncMongoClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
        tz_aware=True,
    )


def get_article_collection() -> AsyncCollection:
    """FastAPI dependency returning the shared article collection handle."""
    settings = get_settings()
    return get_mongo_client()[settings.mongodb_database][settings.mongodb_collection]


async def ping_database() -> None:
    """Round-trip to the server; raises ``PyMongoError`` when unreachable."""
    settings = get_settings()
    await get_mongo_client().admin.command("ping")
    logger.info(
        "MongoDB connected (database=%s, collection=%s)",
        settings.mongodb_database,
        settings.mongodb_collection,
    )


async def close_mongo_client() -> None:
    """Close the shared client, if one was ever created."""
    if get_mongo_client.cache_info().currsize:
        await get_mongo_client().close()
        get_mongo_client.cache_clear()
        logger.debug("MongoDB client closed")
