"""
Shared fixtures for the weeklog test suite.

Every test gets its own log file under ``tmp_path`` and a week context with a
frozen clock, so nothing touches the configured data directory.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from weeklog.app import create_app
from weeklog.core.storage import get_weeklog
from weeklog.models import CategoryRegistry, LogEntry, WeekContext
from weeklog.services.store import WeekLog

WEEK_START = 1_700_000_000
NOW_OFFSET = 3600.75


def make_entry(
    steamid: int = 76561198000000001,
    category: str = "main",
    time: int = 100,
    portals: int = 3,
    timestamp: int = 10,
) -> LogEntry:
    return LogEntry(
        steamid=steamid,
        category=category,
        time=time,
        portals=portals,
        timestamp=timestamp,
    )


@pytest.fixture
def registry() -> CategoryRegistry:
    return CategoryRegistry.from_keys(["main", "lp", "ppnf"], portal_keys=["lp"])


@pytest.fixture
def context(registry: CategoryRegistry) -> WeekContext:
    return WeekContext(
        registry=registry,
        week_start=WEEK_START,
        clock=lambda: WEEK_START + NOW_OFFSET,
    )


@pytest.fixture
def weeklog(tmp_path, context: WeekContext) -> WeekLog:
    return WeekLog(tmp_path / "weeklog.bin", context)


@pytest.fixture
def client(weeklog: WeekLog) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_weeklog] = lambda: weeklog
    return TestClient(app)
