"""
Tests for turning configuration into the week context.

The week start has no usable default: record timestamps are 24-bit offsets
from it, so an unset value must stop the service instead of rejecting runs.
"""

import time

import pytest
from fastapi.testclient import TestClient

from weeklog.app import create_app
from weeklog.core import config
from weeklog.core.storage import build_week_context, get_weeklog
from weeklog.services.store import WeekLog


@pytest.fixture
def fresh_weeklog_cache():
    get_weeklog.cache_clear()
    yield
    get_weeklog.cache_clear()


class TestWeekStart:
    """Test that the week start must be configured."""

    def test_unset_week_start_is_refused(self, monkeypatch):
        monkeypatch.setattr(config, "WEEKLOG_WEEK_START", None)
        with pytest.raises(RuntimeError, match="WEEKLOG_WEEK_START"):
            build_week_context()

    def test_app_startup_fails_without_week_start(
        self, monkeypatch, fresh_weeklog_cache
    ):
        monkeypatch.setattr(config, "WEEKLOG_WEEK_START", None)
        with pytest.raises(RuntimeError, match="WEEKLOG_WEEK_START"):
            with TestClient(create_app()):
                pass

    def test_configured_week_start_stamps_runs_with_clock(self, monkeypatch, tmp_path):
        week_start = int(time.time()) - 60
        monkeypatch.setattr(config, "WEEKLOG_WEEK_START", week_start)

        context = build_week_context()
        weeklog = WeekLog(tmp_path / "weeklog.bin", context)
        weeklog.append(1, "main", 100, 1)

        assert context.week_start == week_start
        [entry] = weeklog.read()
        assert 60 <= entry.timestamp < 600
