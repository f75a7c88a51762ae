"""Core configuration and infrastructure helpers."""

from .config import (
    ADMIN_TOKEN,
    ALLOWED_CORS_ORIGINS,
    LOG_JSON,
    LOG_LEVEL,
    WEEKLOG_CATEGORIES,
    WEEKLOG_PATH,
    WEEKLOG_PORTAL_CATEGORIES,
    WEEKLOG_WEEK_START,
    require_week_start,
)
from .errors import (
    ArgsError,
    CategoryError,
    CommandError,
    CorruptLogError,
    EncodeError,
    TimestampError,
    WeeklogError,
)
from .logging import configure_logging, get_logger
from .time import unix_now

__all__ = [
    "ADMIN_TOKEN",
    "ALLOWED_CORS_ORIGINS",
    "ArgsError",
    "CategoryError",
    "CommandError",
    "CorruptLogError",
    "EncodeError",
    "LOG_JSON",
    "LOG_LEVEL",
    "TimestampError",
    "WEEKLOG_CATEGORIES",
    "WEEKLOG_PATH",
    "WEEKLOG_PORTAL_CATEGORIES",
    "WEEKLOG_WEEK_START",
    "WeeklogError",
    "configure_logging",
    "get_logger",
    "require_week_start",
    "unix_now",
]
