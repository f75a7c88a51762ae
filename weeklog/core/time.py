"""Clock helpers shared by the weeklog and its API."""

from __future__ import annotations

import time


def unix_now() -> float:
    """Return the current UNIX time in seconds."""
    return time.time()


__all__ = ["unix_now"]
