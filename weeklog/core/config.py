"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Weeklog storage ------------------------------------------------------------
WEEKLOG_PATH = Path(os.getenv("WEEKLOG_PATH", "data/weeklog.bin"))

# Registry order is the on-disk category index, so it must not be reordered
# mid-week.
WEEKLOG_CATEGORIES = _unique(_split_csv(os.getenv("WEEKLOG_CATEGORIES", "main,lp")))
WEEKLOG_PORTAL_CATEGORIES = _unique(
    _split_csv(os.getenv("WEEKLOG_PORTAL_CATEGORIES", "lp"))
)

# UNIX seconds at which the current competition week started. Required: the
# 24-bit record timestamp only holds offsets inside one week.
WEEKLOG_WEEK_START = _env_int("WEEKLOG_WEEK_START")


def require_week_start() -> int:
    """Return the configured week start, failing if it was never set."""

    if WEEKLOG_WEEK_START is None:
        raise RuntimeError("Missing required environment variable: WEEKLOG_WEEK_START")
    return WEEKLOG_WEEK_START


# Application security -------------------------------------------------------
ADMIN_TOKEN = os.getenv("WEEKLOG_ADMIN_TOKEN") or None

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_split_csv(os.getenv("ALLOWED_CORS_ORIGINS")),
        *_local_dev_origins,
    ]
)


# Runtime behaviour ----------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
LOG_JSON = _env_bool("LOG_JSON", False)


__all__ = [
    "ADMIN_TOKEN",
    "ALLOWED_CORS_ORIGINS",
    "LOG_JSON",
    "LOG_LEVEL",
    "WEEKLOG_CATEGORIES",
    "WEEKLOG_PATH",
    "WEEKLOG_PORTAL_CATEGORIES",
    "WEEKLOG_WEEK_START",
    "require_week_start",
]
