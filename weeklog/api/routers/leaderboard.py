"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from ...core.storage import get_weeklog
from ...services.codec import parse_steamid
from ...services.entries import leaderboard_to_dict, run_to_dict
from ...services.leaderboard import player_runs
from ...services.store import WeekLog

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard")
def get_leaderboard(weeklog: WeekLog = Depends(get_weeklog)) -> Dict[str, Any]:
    """Reconstruct every category's leaderboard from the weeklog."""

    return {
        "week_start": weeklog.context.week_start,
        "leaderboard": leaderboard_to_dict(weeklog.reconstruct()),
    }


@router.get("/leaderboard/players/{steamid}")
def get_player_placements(
    steamid: str, weeklog: WeekLog = Depends(get_weeklog)
) -> Dict[str, Any]:
    """Get a player's placement in every category they have a run in."""

    wanted = parse_steamid(steamid)
    placements = player_runs(weeklog.reconstruct(), wanted)
    return {
        "steamid": str(wanted),
        "placements": [
            {"category": category, "rank": rank, "run": run_to_dict(run)}
            for category, (rank, run) in placements.items()
        ],
    }


@router.get("/leaderboard/{category}")
def get_category_leaderboard(
    category: str, weeklog: WeekLog = Depends(get_weeklog)
) -> Dict[str, Any]:
    """Get the ranked runs of a single category."""

    if category not in weeklog.context.registry:
        raise HTTPException(404, "Category not found")

    runs = weeklog.reconstruct()[category]
    return {
        "category": category,
        "ranking": weeklog.context.registry.get(category).ranking,
        "entries": [run_to_dict(run) for run in runs],
    }


__all__ = ["router"]
