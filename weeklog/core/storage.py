"""Weeklog wiring and the FastAPI dependency that hands it out."""

from __future__ import annotations

from functools import lru_cache

from ..models import CategoryRegistry, WeekContext
from ..services.store import WeekLog
from .config import (
    WEEKLOG_CATEGORIES,
    WEEKLOG_PATH,
    WEEKLOG_PORTAL_CATEGORIES,
    require_week_start,
)


def build_week_context() -> WeekContext:
    """Assemble the current week's context from configuration."""

    registry = CategoryRegistry.from_keys(
        WEEKLOG_CATEGORIES, portal_keys=WEEKLOG_PORTAL_CATEGORIES
    )
    return WeekContext(registry=registry, week_start=require_week_start())


@lru_cache(maxsize=None)
def get_weeklog() -> WeekLog:
    """FastAPI dependency returning the process-wide weeklog."""

    return WeekLog(WEEKLOG_PATH, build_week_context())


__all__ = ["build_week_context", "get_weeklog"]
