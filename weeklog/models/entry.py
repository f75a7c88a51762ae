"""Model for a single weeklog record."""

from __future__ import annotations

from sqlmodel import SQLModel


class LogEntry(SQLModel):
    """One submitted run, or a tombstone when time and portals are both zero."""

    steamid: int
    category: str
    time: int
    portals: int
    timestamp: int

    @property
    def is_tombstone(self) -> bool:
        return self.time == 0 and self.portals == 0


__all__ = ["LogEntry"]
