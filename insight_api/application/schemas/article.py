"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ArticleResponse(BaseModel):
    """A single article. Every stored field beyond ``id`` is passed through."""

    id: str

    model_config = ConfigDict(extra="allow")


class ArticlePageResponse(BaseModel):
    """Paginated search envelope, serialised with camelCase keys."""

    total_records: int
    total_pages: int
    current_page: int
    articles: list[ArticleResponse]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BulkDeleteRequest(BaseModel):
    """Body of ``DELETE /api/search/multiple``."""

    ids: list[str] = Field(..., examples=[["65a1f0c2e4b0a1b2c3d4e5f6"]])


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    error: str


# Partial updates accept any JSON object; field names and types are not checked.
ArticleUpdate = dict[str, Any]
