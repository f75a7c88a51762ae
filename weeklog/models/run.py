"""Model for a ranked leaderboard run."""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlmodel import SQLModel


class Run(SQLModel):
    """Leaderboard row rebuilt from the weeklog.

    ``portals`` and ``segmented`` are only populated for categories ranked by
    portal count.
    """

    steamid: str
    time: int
    date: int
    note: str = ""
    portals: Optional[int] = None
    segmented: Optional[bool] = None


Leaderboard = Dict[str, List[Run]]


__all__ = ["Leaderboard", "Run"]
