"""Aggregate API routers."""

from fastapi import APIRouter

from .leaderboard import router as leaderboard_router
from .log import router as log_router
from .system import router as system_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    log_router,
    leaderboard_router,
)

__all__ = ["ALL_ROUTERS"]
