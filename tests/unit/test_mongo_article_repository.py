"""Unit tests for MongoArticleRepository and the filter → MongoDB query mapping."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

import pytest
from bson import Binary, Decimal128, ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from insight_api.application.services import build_article_query
from insight_api.domain.entities import ArticleFilter, DateRange
from insight_api.domain.exceptions import RepositoryError
from insight_api.infrastructure.database.repositories import (
    MongoArticleRepository,
    to_json_safe,
    to_mongo_query,
)


# ── Fakes ────────────────────────────────────────────────────────────


@dataclass
class _UpdateResult:
    matched_count: int


@dataclass
class _DeleteResult:
    deleted_count: int


class FakeCursor:
    def __init__(self, documents: list[dict[str, Any]]):
        self._documents = documents
        self.skipped = 0
        self.limited = 0

    def skip(self, n: int) -> "FakeCursor":
        self.skipped = n
        return self

    def limit(self, n: int) -> "FakeCursor":
        self.limited = n
        return self

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        return self._documents[self.skipped : self.skipped + self.limited]


class FakeCollection:
    """Records the queries it receives; returns canned documents."""

    def __init__(self, documents: list[dict[str, Any]] | None = None, error: Exception | None = None):
        self.documents = documents or []
        self.error = error
        self.queries: list[tuple[str, Any]] = []
        self.cursor: FakeCursor | None = None

    def _check(self) -> None:
        if self.error is not None:
            raise self.error

    async def count_documents(self, query: dict[str, Any]) -> int:
        self.queries.append(("count_documents", query))
        self._check()
        return len(self.documents)

    def find(self, query: dict[str, Any]) -> FakeCursor:
        self.queries.append(("find", query))
        self._check()
        self.cursor = FakeCursor(self.documents)
        return self.cursor

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        self.queries.append(("find_one", query))
        self._check()
        return next((d for d in self.documents if d["_id"] == query["_id"]), None)

    async def update_one(self, query: dict[str, Any], update: dict[str, Any]) -> _UpdateResult:
        self.queries.append(("update_one", (query, update)))
        self._check()
        matched = [d for d in self.documents if d["_id"] == query["_id"]]
        for doc in matched:
            doc.update(update["$set"])
        return _UpdateResult(matched_count=len(matched))

    async def delete_one(self, query: dict[str, Any]) -> _DeleteResult:
        self.queries.append(("delete_one", query))
        self._check()
        before = len(self.documents)
        self.documents = [d for d in self.documents if d["_id"] != query["_id"]]
        return _DeleteResult(deleted_count=before - len(self.documents))

    async def delete_many(self, query: dict[str, Any]) -> _DeleteResult:
        self.queries.append(("delete_many", query))
        self._check()
        targets = set(query["_id"]["$in"])
        before = len(self.documents)
        self.documents = [d for d in self.documents if d["_id"] not in targets]
        return _DeleteResult(deleted_count=before - len(self.documents))


# ── Query mapping ────────────────────────────────────────────────────


def test_empty_filter_matches_everything():
    assert to_mongo_query(ArticleFilter()) == {}


def test_equality_fields_are_copied():
    query = to_mongo_query(build_article_query({"region": "Africa", "intensity": "6"}).filter)
    assert query == {"region": "Africa", "intensity": 6}


def test_title_query_is_escaped_case_insensitive_regex():
    query = to_mongo_query(ArticleFilter(title_contains="U.S. (oil)"))
    assert query == {"title": {"$regex": r"U\.S\.\ \(oil\)", "$options": "i"}}


def test_date_range_applies_to_added_and_published_independently():
    start, end = datetime(2017, 1, 1), datetime(2017, 12, 31)
    query = to_mongo_query(ArticleFilter(date_range=DateRange(start=start, end=end)))
    assert query == {
        "added": {"$gte": start, "$lte": end},
        "published": {"$gte": start, "$lte": end},
    }
    assert query["added"] is not query["published"]


def test_single_bound_emits_single_operator():
    start = datetime(2017, 1, 1)
    query = to_mongo_query(ArticleFilter(date_range=DateRange(start=start)))
    assert query == {"added": {"$gte": start}, "published": {"$gte": start}}


def test_empty_date_range_is_omitted():
    assert to_mongo_query(ArticleFilter(date_range=DateRange())) == {}


# ── Repository ───────────────────────────────────────────────────────


def test_is_valid_id():
    repo = MongoArticleRepository(FakeCollection())
    assert repo.is_valid_id(str(ObjectId()))
    assert not repo.is_valid_id("123")
    assert not repo.is_valid_id("zzzzzzzzzzzzzzzzzzzzzzzz")


@pytest.mark.asyncio
async def test_find_applies_skip_limit_and_exposes_string_id():
    docs = [{"_id": ObjectId(), "title": f"t{i}"} for i in range(5)]
    collection = FakeCollection(docs)
    repo = MongoArticleRepository(collection)

    articles = await repo.find(ArticleFilter(equals={"region": "Africa"}), skip=2, limit=2)

    assert collection.queries[0] == ("find", {"region": "Africa"})
    assert collection.cursor.skipped == 2 and collection.cursor.limited == 2
    assert [a.id for a in articles] == [str(docs[2]["_id"]), str(docs[3]["_id"])]
    assert articles[0].to_document() == {"id": str(docs[2]["_id"]), "title": "t2"}


@pytest.mark.asyncio
async def test_get_by_id_queries_object_id():
    oid = ObjectId()
    collection = FakeCollection([{"_id": oid, "title": "x"}])
    repo = MongoArticleRepository(collection)

    article = await repo.get_by_id(str(oid))
    assert article is not None and article.fields == {"title": "x"}
    assert await repo.get_by_id(str(ObjectId())) is None
    assert collection.queries[0] == ("find_one", {"_id": oid})


@pytest.mark.asyncio
async def test_update_fields_uses_set():
    oid = ObjectId()
    collection = FakeCollection([{"_id": oid, "title": "x", "sector": "Energy"}])
    repo = MongoArticleRepository(collection)

    assert await repo.update_fields(str(oid), {"title": "y"}) is True
    assert collection.queries[0] == ("update_one", ({"_id": oid}, {"$set": {"title": "y"}}))
    assert collection.documents[0] == {"_id": oid, "title": "y", "sector": "Energy"}
    assert await repo.update_fields(str(ObjectId()), {"title": "z"}) is False


@pytest.mark.asyncio
async def test_delete_and_delete_many():
    oids = [ObjectId() for _ in range(3)]
    collection = FakeCollection([{"_id": oid} for oid in oids])
    repo = MongoArticleRepository(collection)

    assert await repo.delete(str(oids[0])) is True
    assert await repo.delete(str(oids[0])) is False
    assert await repo.delete_many([str(oids[1]), str(oids[2]), str(ObjectId())]) == 2
    assert collection.documents == []


@pytest.mark.asyncio
async def test_driver_errors_become_repository_errors():
    collection = FakeCollection(error=ServerSelectionTimeoutError("no servers"))
    repo = MongoArticleRepository(collection)

    with pytest.raises(RepositoryError) as exc_info:
        await repo.count(ArticleFilter())
    assert exc_info.value.operation == "count"
    assert isinstance(exc_info.value.cause, ServerSelectionTimeoutError)


@pytest.mark.asyncio
async def test_skip_beyond_bson_range_returns_empty_page_without_store_call():
    collection = FakeCollection([{"_id": ObjectId(), "title": "x"}])
    repo = MongoArticleRepository(collection)

    page = build_article_query({"page": "99999999999999999999"}).pagination
    articles = await repo.find(ArticleFilter(), skip=page.skip, limit=page.limit)

    assert page.skip > 2**63 - 1
    assert articles == []
    assert collection.queries == []


@pytest.mark.asyncio
async def test_bson_only_values_are_returned_json_safe():
    oid, ref = ObjectId(), ObjectId()
    collection = FakeCollection(
        [
            {
                "_id": oid,
                "title": "x",
                "ref": ref,
                "price": Decimal128("12.50"),
                "related": [{"ref": ref}],
                "added": datetime(2017, 1, 20),
            }
        ]
    )
    repo = MongoArticleRepository(collection)

    article = await repo.get_by_id(str(oid))

    assert article.fields == {
        "title": "x",
        "ref": str(ref),
        "price": "12.50",
        "related": [{"ref": str(ref)}],
        "added": datetime(2017, 1, 20),
    }


def test_to_json_safe_uses_extended_json_for_other_bson_types():
    value = to_json_safe({"blob": Binary(b"\x00\x01", subtype=5)})
    assert value == {"blob": {"$binary": {"base64": "AAE=", "subType": "05"}}}
