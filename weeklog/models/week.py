"""Explicit per-week context handed to the weeklog."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Callable

from ..core.time import unix_now
from .category import CategoryRegistry


@dataclass(frozen=True)
class WeekContext:
    """Category registry and start epoch of the current competition week."""

    registry: CategoryRegistry
    week_start: int
    clock: Callable[[], float] = field(default=unix_now, compare=False)

    def seconds_into_week(self) -> int:
        """Whole seconds elapsed since the week started."""

        return math.floor(self.clock() - self.week_start)

    def next_week(self, week_start: int, registry: CategoryRegistry | None = None) -> "WeekContext":
        return replace(
            self,
            week_start=week_start,
            registry=registry if registry is not None else self.registry,
        )


__all__ = ["WeekContext"]
