"""Concrete repository implementation backed by MongoDB (pymongo async API)."""

import json
import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any

from bson import Decimal128, ObjectId, json_util
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from insight_api.application.interfaces import ArticleRepository
from insight_api.domain.entities import DATE_RANGE_FIELDS, Article, ArticleFilter
from insight_api.domain.exceptions import RepositoryError

logger = logging.getLogger(__name__)

# skip/limit travel as signed 64-bit BSON integers.
MAX_BSON_INT = 2**63 - 1

_JSON_NATIVE = (str, int, float, bool, datetime, type(None))


def to_json_safe(value: Any) -> Any:
    """Convert BSON-only values (ObjectId, Decimal128, Binary, ...) into JSON-safe ones."""
    if isinstance(value, dict):
        return {key: to_json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_safe(item) for item in value]
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, Decimal128):
        return str(value.to_decimal())
    if isinstance(value, _JSON_NATIVE):
        return value
    # Relaxed Extended JSON, e.g. {"$binary": {...}} or {"$regularExpression": {...}}
    return json.loads(json_util.dumps(value, json_options=json_util.RELAXED_JSON_OPTIONS))

def to_mongo_query(article_filter: ArticleFilter) -> dict[str, Any]:
    """Map a domain filter → MongoDB query document."""
    query: dict[str, Any] = dict(article_filter.equals)

    if article_filter.title_contains is not None:
        query["title"] = {
            "$regex": re.escape(article_filter.title_contains),
            "$options": "i",
        }

    date_range = article_filter.date_range
    if date_range is not None and not date_range.is_empty():
        bounds: dict[str, Any] = {}
        if date_range.start is not None:
            bounds["$gte"] = date_range.start
        if date_range.end is not None:
            bounds["$lte"] = date_range.end
        for name in DATE_RANGE_FIELDS:
            query[name] = dict(bounds)

    return query


@contextmanager
def _store_operation(operation: str) -> Iterator[None]:
    """Re-raise driver failures as RepositoryError."""
    try:
        yield
    except PyMongoError as exc:
        logger.error("MongoDB %s failed: %s", operation, exc)
        raise RepositoryError(operation, exc) from exc


class MongoArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port on a single MongoDB collection."""

    def __init__(self, collection: AsyncCollection):
        self._collection = collection

    def _to_entity(self, document: dict[str, Any]) -> Article:
        """Map stored document → domain entity (``_id`` becomes the string id)."""
        fields = dict(document)
        object_id = fields.pop("_id")
        return Article(id=str(object_id), fields=to_json_safe(fields))

    def is_valid_id(self, article_id: str) -> bool:
        return ObjectId.is_valid(article_id)

    async def count(self, article_filter: ArticleFilter) -> int:
        with _store_operation("count"):
            return await self._collection.count_documents(to_mongo_query(article_filter))

    async def find(self, article_filter: ArticleFilter, skip: int = 0, limit: int = 20) -> list[Article]:
        query = to_mongo_query(article_filter)
        if skip > MAX_BSON_INT:
            # Far past the last page; the driver cannot even encode this offset.
            return []
        logger.debug("find %s skip=%d limit=%d", query, skip, limit)
        with _store_operation("find"):
            cursor = self._collection.find(query).skip(skip).limit(limit)
            documents = await cursor.to_list()
        return [self._to_entity(doc) for doc in documents]

    async def get_by_id(self, article_id: str) -> Article | None:
        with _store_operation("find_one"):
            document = await self._collection.find_one({"_id": ObjectId(article_id)})
        return self._to_entity(document) if document else None

    async def update_fields(self, article_id: str, fields: dict[str, Any]) -> bool:
        with _store_operation("update_one"):
            result = await self._collection.update_one(
                {"_id": ObjectId(article_id)},
                {"$set": fields},
            )
        return result.matched_count > 0

    async def delete(self, article_id: str) -> bool:
        with _store_operation("delete_one"):
            result = await self._collection.delete_one({"_id": ObjectId(article_id)})
        return result.deleted_count > 0

    async def delete_many(self, article_ids: list[str]) -> int:
        object_ids = [ObjectId(i) for i in article_ids]
        with _store_operation("delete_many"):
            result = await self._collection.delete_many({"_id": {"$in": object_ids}})
        return result.deleted_count
