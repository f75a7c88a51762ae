"""Replay decoded weeklog entries into ranked per-category leaderboards."""

from __future__ import annotations

from bisect import bisect_left
from typing import Callable, Dict, List, Sequence, Set, Tuple

from ..models import Category, CategoryRegistry, Leaderboard, LogEntry, Run

RankKey = Tuple[int, ...]


def _time_key(run: Run) -> RankKey:
    return (run.time,)


def _portal_key(run: Run) -> RankKey:
    # Segmented runs sort ahead of unsegmented ones on equal portal counts.
    return (run.portals or 0, 0 if run.segmented else 1, run.time)


def rank_key_for(category: Category) -> Callable[[Run], RankKey]:
    """Return the sort key implementing ``category``'s ranking rule."""

    return _portal_key if category.ranks_by_portals else _time_key


def build_run(entry: LogEntry, category: Category, week_start: int) -> Run:
    fields = {
        "steamid": str(entry.steamid),
        "time": entry.time,
        "date": entry.timestamp + week_start,
        "note": "",
    }
    if category.ranks_by_portals:
        # Nothing submits segmented runs yet; the flag only keeps the ordering.
        fields.update(portals=entry.portals, segmented=False)
    return Run(**fields)


def insert_ranked(runs: List[Run], run: Run, key: Callable[[Run], RankKey]) -> None:
    """Insert ``run`` before the first run that does not strictly precede it."""

    runs.insert(bisect_left(runs, key(run), key=key), run)


def reconstruct_leaderboard(
    entries: Sequence[LogEntry],
    registry: CategoryRegistry,
    week_start: int,
) -> Leaderboard:
    """Build the leaderboard for every category in ``registry``.

    ``entries`` must already have tombstones resolved. Entries are replayed
    newest first so that only a player's latest submission per category
    survives.
    """

    leaderboard: Leaderboard = {category.key: [] for category in registry}
    seen: Dict[str, Set[int]] = {category.key: set() for category in registry}

    for entry in reversed(entries):
        category = registry.get(entry.category)
        if entry.steamid in seen[category.key]:
            continue
        seen[category.key].add(entry.steamid)

        run = build_run(entry, category, week_start)
        insert_ranked(leaderboard[category.key], run, rank_key_for(category))

    return leaderboard


def player_runs(leaderboard: Leaderboard, steamid: int | str) -> Dict[str, Tuple[int, Run]]:
    """Return ``{category: (placement, run)}`` for one player, 1-based."""

    wanted = str(steamid)
    found: Dict[str, Tuple[int, Run]] = {}
    for key, runs in leaderboard.items():
        for position, run in enumerate(runs, start=1):
            if run.steamid == wanted:
                found[key] = (position, run)
                break
    return found


__all__ = [
    "build_run",
    "insert_ranked",
    "player_runs",
    "rank_key_for",
    "reconstruct_leaderboard",
]
