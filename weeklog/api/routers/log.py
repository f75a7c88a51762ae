"""Weeklog read and moderation endpoints."""

from __future__ import annotations

import hmac
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Header, HTTPException

from ... import core
from ...core.storage import get_weeklog
from ...services.commands import run_command
from ...services.entries import entry_to_dict, result_to_json
from ...services.store import WeekLog

router = APIRouter(prefix="/weeklog", tags=["weeklog"])


def require_admin(x_admin_token: Optional[str] = Header(default=None)) -> None:
    """Guard mutating routes when an admin token is configured."""

    expected = core.ADMIN_TOKEN
    if not expected:
        return
    if not x_admin_token or not hmac.compare_digest(x_admin_token, expected):
        raise HTTPException(403, "Admin token required")


@router.get("")
def read_weeklog(weeklog: WeekLog = Depends(get_weeklog)) -> Dict[str, List[Dict[str, Any]]]:
    """List visible weeklog entries in submission order."""

    return {"entries": [entry_to_dict(entry) for entry in weeklog.read()]}


@router.post("", dependencies=[Depends(require_admin)])
def add_entry(
    body: Dict[str, Any] = Body(...), weeklog: WeekLog = Depends(get_weeklog)
) -> Dict[str, Any]:
    """Append a run submission."""

    result = weeklog.append(
        body.get("steamid"),
        body.get("category"),
        body.get("time"),
        body.get("portals"),
        body.get("timestamp"),
    )
    return {"ok": True, "result": result}


@router.post("/tombstone", dependencies=[Depends(require_admin)])
def add_tombstone(
    body: Dict[str, Any] = Body(...), weeklog: WeekLog = Depends(get_weeklog)
) -> Dict[str, Any]:
    """Soft-delete a player's latest run in a category."""

    result = weeklog.tombstone(
        body.get("steamid"), body.get("category"), body.get("timestamp")
    )
    return {"ok": True, "result": result}


@router.delete("/{timestamp}", dependencies=[Depends(require_admin)])
def remove_entry(timestamp: int, weeklog: WeekLog = Depends(get_weeklog)) -> Dict[str, Any]:
    """Physically delete the record carrying ``timestamp``."""

    result = weeklog.remove(timestamp)
    return {"ok": True, "result": result, "removed": timestamp}


@router.post("/command", dependencies=[Depends(require_admin)])
def command(
    body: Dict[str, Any] = Body(...), weeklog: WeekLog = Depends(get_weeklog)
) -> Dict[str, Any]:
    """Run a raw ``[command, *args]`` call against the weeklog."""

    args = body.get("args")
    if not isinstance(args, list):
        raise HTTPException(400, "args must be a list")
    return {"ok": True, "result": result_to_json(run_command(args, weeklog))}


__all__ = ["require_admin", "router"]
