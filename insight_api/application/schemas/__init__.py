from .article import (
    ArticlePageResponse,
    ArticleResponse,
    ArticleUpdate,
    BulkDeleteRequest,
    ErrorResponse,
    MessageResponse,
)

__all__ = [
    "ArticlePageResponse",
    "ArticleResponse",
    "ArticleUpdate",
    "BulkDeleteRequest",
    "ErrorResponse",
    "MessageResponse",
]
