"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from ...core import (
    BOOSTER_FACTOR,
    CARD_SPENDING_TARGET,
    DAILY_LEADERBOARD_LIMIT,
    GLOBAL_LEADERBOARD_LIMIT,
    MAX_LEADERBOARD_LIMIT,
)

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/config")
def get_config() -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {
        "booster_factor": BOOSTER_FACTOR,
        "card_spending_target": CARD_SPENDING_TARGET,
        "daily_leaderboard_limit": DAILY_LEADERBOARD_LIMIT,
        "global_leaderboard_limit": GLOBAL_LEADERBOARD_LIMIT,
        "max_leaderboard_limit": MAX_LEADERBOARD_LIMIT,
    }


__all__ = ["router"]
