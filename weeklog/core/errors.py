"""Error types raised by weeklog operations.

Every error carries a stable ``code`` (``ERR_ARGS``, ``ERR_CATEGORY`` ...) so
that callers driving the command surface can branch on it without parsing
messages, plus the arguments of the failing call for diagnostics.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class WeeklogError(Exception):
    """Base class for all weeklog failures."""

    code = "ERR_WEEKLOG"

    def __init__(self, message: str = "", args: Optional[Sequence[Any]] = None):
        super().__init__(message or self.code)
        self.message = message or self.code
        self.call_args = list(args) if args is not None else []

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ArgsError(WeeklogError):
    """A required argument was missing."""

    code = "ERR_ARGS"


class CategoryError(WeeklogError):
    """A category is absent from the registry or its index is out of range."""

    code = "ERR_CATEGORY"


class EncodeError(WeeklogError):
    """A field does not fit its fixed-width slot in the record."""

    code = "ERR_ENCODE"


class TimestampError(WeeklogError):
    """No record carries the requested timestamp."""

    code = "ERR_TIMESTAMP"


class CommandError(WeeklogError):
    """Unknown command name."""

    code = "ERR_COMMAND"


class CorruptLogError(WeeklogError):
    """The log file length is not a whole number of records."""

    code = "ERR_CORRUPT"


__all__ = [
    "ArgsError",
    "CategoryError",
    "CommandError",
    "CorruptLogError",
    "EncodeError",
    "TimestampError",
    "WeeklogError",
]
