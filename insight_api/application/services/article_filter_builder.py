"""Translate raw search parameters into an ArticleQuery.

Pure and deterministic: no I/O, and the same input always yields the same
filter and pagination. Values that are missing, empty or cannot be coerced
are treated as "not supplied" rather than raising, so a malformed numeric
or date parameter widens the search instead of failing it.
"""

import logging
from collections.abc import Mapping
from datetime import datetime

from dateutil import parser as date_parser

from insight_api.domain.entities import ArticleFilter, ArticleQuery, DateRange, Pagination

logger = logging.getLogger(__name__)

# Missing date parts ("2017", "March 2017") resolve against this, never today.
_DATE_DEFAULTS = datetime(2000, 1, 1)

TEXT_FIELDS: tuple[str, ...] = (
    "start_year",
    "sector",
    "topic",
    "region",
    "country",
    "pestle",
    "source",
)
INTEGER_FIELDS: tuple[str, ...] = (
    "end_year",
    "intensity",
    "relevance",
    "likelihood",
)
SEARCH_PARAMETERS: tuple[str, ...] = (
    "query",
    *INTEGER_FIELDS,
    *TEXT_FIELDS,
    "start_date",
    "end_date",
    "page",
    "limit",
)


def build_article_query(
    params: Mapping[str, str | None],
    *,
    default_limit: int = 20,
    max_limit: int = 1000,
) -> ArticleQuery:
    """Build the filter predicate and pagination descriptor for a search."""
    equals: dict[str, str | int] = {}

    for name in INTEGER_FIELDS:
        value = _parse_int(name, params.get(name))
        if value is not None:
            equals[name] = value

    for name in TEXT_FIELDS:
        value = params.get(name)
        if value:
            equals[name] = value

    article_filter = ArticleFilter(
        equals=equals,
        title_contains=params.get("query") or None,
        date_range=_build_date_range(params.get("start_date"), params.get("end_date")),
    )

    page = _parse_positive(params.get("page"), 1)
    limit = min(_parse_positive(params.get("limit"), default_limit), max_limit)

    return ArticleQuery(filter=article_filter, pagination=Pagination(page=page, limit=limit))


def _build_date_range(raw_start: str | None, raw_end: str | None) -> DateRange | None:
    date_range = DateRange(
        start=_parse_date("start_date", raw_start),
        end=_parse_date("end_date", raw_end),
    )
    if date_range.is_empty():
        return None
    return date_range


def _parse_int(name: str, raw: str | None) -> int | None:
    if not raw:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logger.debug("Ignoring non-numeric %s filter: %r", name, raw)
        return None


def _parse_date(name: str, raw: str | None) -> datetime | None:
    if not raw:
        return None
    try:
        return date_parser.parse(raw, default=_DATE_DEFAULTS)
    except (ValueError, OverflowError):
        logger.debug("Ignoring unparseable %s filter: %r", name, raw)
        return None


def _parse_positive(raw: str | None, default: int) -> int:
    """Parse a pagination value, falling back to ``default`` when invalid or < 1."""
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= 1 else default
