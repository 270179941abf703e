"""Domain entities for article search: filter predicate and pagination."""

from dataclasses import dataclass, field
from datetime import datetime


# Date bounds apply to each of these fields independently.
DATE_RANGE_FIELDS: tuple[str, ...] = ("added", "published")


@dataclass(frozen=True)
class DateRange:
    """Inclusive date bounds; at least one side is set."""

    start: datetime | None = None
    end: datetime | None = None

    def is_empty(self) -> bool:
        return self.start is None and self.end is None


@dataclass
class ArticleFilter:
    """Conjunction of per-field conditions applied to an article search.

    ``equals`` holds exact matches (already coerced to str or int),
    ``title_contains`` is a case-insensitive substring match on ``title``
    and ``date_range`` bounds both ``added`` and ``published``.
    """

    equals: dict[str, str | int] = field(default_factory=dict)
    title_contains: str | None = None
    date_range: DateRange | None = None

    def is_empty(self) -> bool:
        return not self.equals and self.title_contains is None and self.date_range is None


@dataclass(frozen=True)
class Pagination:
    """1-based page number and page size."""

    page: int = 1
    limit: int = 20

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class ArticleQuery:
    """Everything needed to run one paginated article search."""

    filter: ArticleFilter = field(default_factory=ArticleFilter)
    pagination: Pagination = field(default_factory=Pagination)
