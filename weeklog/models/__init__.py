"""Domain model exports."""

from .category import (
    Category,
    CategoryRegistry,
    MAX_CATEGORIES,
    RANKING_PORTALS,
    RANKING_TIME,
)
from .entry import LogEntry
from .run import Leaderboard, Run
from .week import WeekContext

__all__ = [
    "Category",
    "CategoryRegistry",
    "Leaderboard",
    "LogEntry",
    "MAX_CATEGORIES",
    "RANKING_PORTALS",
    "RANKING_TIME",
    "Run",
    "WeekContext",
]
