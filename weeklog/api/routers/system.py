"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...core.storage import get_weeklog
from ...services.commands import command_names
from ...services.store import WeekLog

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/healthz")
def healthz() -> JSONResponse:
    """Kubernetes-style readiness endpoint."""

    return JSONResponse({"ok": True})


@router.get("/config")
def get_config(weeklog: WeekLog = Depends(get_weeklog)) -> Dict[str, Any]:
    """Expose the current week's configuration."""

    context = weeklog.context
    return {
        "week_start": context.week_start,
        "categories": [
            {"key": category.key, "ranking": category.ranking}
            for category in context.registry
        ],
        "commands": command_names(),
    }


__all__ = ["router"]
