"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Article:
    """Core domain entity representing a single insight article.

    Articles are schema-less: apart from the immutable ``id`` every stored
    field (title, sector, intensity, added, ...) lives in ``fields`` and is
    passed through unchanged.
    """

    id: str
    fields: dict[str, Any] = field(default_factory=dict)

    def to_document(self) -> dict[str, Any]:
        """Flatten into the wire representation; a stored ``id`` field never wins."""
        document: dict[str, Any] = {"id": self.id}
        document.update((k, v) for k, v in self.fields.items() if k != "id")
        return document


@dataclass
class ArticlePage:
    """One page of a filtered article listing."""

    total_records: int
    total_pages: int
    current_page: int
    articles: list[Article] = field(default_factory=list)
