"""Helpers turning weeklog domain objects into API-friendly dicts."""

from __future__ import annotations

from typing import Any, Dict, List

from ..models import Leaderboard, LogEntry, Run


def entry_to_dict(entry: LogEntry) -> Dict[str, Any]:
    """Serialise a log entry; steamids go out as strings to survive JSON clients."""

    return {
        "steamid": str(entry.steamid),
        "category": entry.category,
        "time": entry.time,
        "portals": entry.portals,
        "timestamp": entry.timestamp,
    }


def run_to_dict(run: Run) -> Dict[str, Any]:
    return run.model_dump(exclude_none=True)


def leaderboard_to_dict(leaderboard: Leaderboard) -> Dict[str, List[Dict[str, Any]]]:
    return {
        category: [run_to_dict(run) for run in runs]
        for category, runs in leaderboard.items()
    }


def result_to_json(result: Any) -> Any:
    """Serialise whatever a command returned."""

    if isinstance(result, dict):
        return leaderboard_to_dict(result)
    if isinstance(result, list):
        return [entry_to_dict(entry) for entry in result]
    return result


__all__ = [
    "entry_to_dict",
    "leaderboard_to_dict",
    "result_to_json",
    "run_to_dict",
]
