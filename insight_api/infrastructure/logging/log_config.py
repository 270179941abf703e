"""Logging setup for the search API.

The root level comes from ``LOG_LEVEL``; the pymongo driver, uvicorn and the
article service/repository layers each get their own level so driver
chatter can be silenced independently.

Usage:
    from insight_api.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the lifespan
"""

import logging
import sys

from insight_api.config import Settings, get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field → logger names it controls
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_mongo": (
        "pymongo",
        "pymongo.command",
        "pymongo.connection",
        "pymongo.serverSelection",
    ),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_service": ("insight_api.application", "insight_api.infrastructure.database"),
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply root and per-category log levels."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)

    levels = {field: _parse_level(getattr(settings, field)) for field in _CATEGORY_MAP}
    for field, names in _CATEGORY_MAP.items():
        for name in names:
            logging.getLogger(name).setLevel(levels[field])

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        " ".join(f"{field.removeprefix('log_level_')}={getattr(settings, field)}" for field in _CATEGORY_MAP),
    )


def _parse_level(raw: str) -> int:
    """Level name → logging constant; unknown names mean INFO."""
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO
