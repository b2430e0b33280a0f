"""Aggregate API routers."""

from fastapi import APIRouter

from .admin import router as admin_router
from .boosters import router as boosters_router
from .leaderboard import router as leaderboard_router
from .scores import router as scores_router
from .system import router as system_router
from .users import router as users_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    users_router,
    scores_router,
    leaderboard_router,
    boosters_router,
    admin_router,
)

__all__ = ["ALL_ROUTERS"]
