"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import (
    DAILY_LEADERBOARD_LIMIT,
    GLOBAL_LEADERBOARD_LIMIT,
    MAX_LEADERBOARD_LIMIT,
    get_session,
)
from ...ranking import (
    ALL_TIME,
    TODAY,
    LeaderboardEntry,
    compute_leaderboard,
    compute_rank,
)
from ...services.scores import load_score_records, make_scope

router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"])


def _resolve_limit(raw: Optional[str], default: int) -> int:
    """Parse the ``limit`` query value; anything unusable falls back to ``default``."""

    try:
        limit = int(raw) if raw is not None else 0
    except ValueError:
        limit = 0
    if limit <= 0:
        return default
    return min(limit, MAX_LEADERBOARD_LIMIT)


def _entries_to_json(entries: List[LeaderboardEntry]) -> List[Dict[str, Any]]:
    return [
        {
            "rank": entry.rank,
            "username": entry.username,
            "score": entry.value,
            "game_type": entry.best.category if entry.best else None,
            "coins": entry.best.coins if entry.best else 0,
        }
        for entry in entries
    ]


def _leaderboard(session: Session, date_filter: str, game_type: Optional[str], limit: int):
    scope = make_scope(date_filter, game_type)
    records = load_score_records(session, scope)
    return _entries_to_json(compute_leaderboard(records, scope, limit))


def _position(session: Session, date_filter: str, username: str, game_type: Optional[str]):
    scope = make_scope(date_filter, game_type)
    username = username.lower()
    result = compute_rank(load_score_records(session, scope), scope, username)
    if result.best is None:
        return {"rank": None, "score": 0, "username": username}
    return {
        "rank": result.rank,
        "score": result.value,
        "game_type": result.best.category,
        "username": username,
    }


@router.get("/daily")
def daily_leaderboard(
    game_type: Optional[str] = None,
    limit: Optional[str] = None,
    session: Session = Depends(get_session),
):
    """Best score per player for today."""

    return _leaderboard(
        session, TODAY, game_type, _resolve_limit(limit, DAILY_LEADERBOARD_LIMIT)
    )


@router.get("/global")
def global_leaderboard(
    game_type: Optional[str] = None,
    limit: Optional[str] = None,
    session: Session = Depends(get_session),
):
    """Best score per player across all days."""

    return _leaderboard(
        session, ALL_TIME, game_type, _resolve_limit(limit, GLOBAL_LEADERBOARD_LIMIT)
    )


@router.get("/daily/position/{username}")
def daily_position(
    username: str,
    game_type: Optional[str] = None,
    session: Session = Depends(get_session),
):
    """A player's rank on today's leaderboard."""

    return _position(session, TODAY, username, game_type)


@router.get("/global/position/{username}")
def global_position(
    username: str,
    game_type: Optional[str] = None,
    session: Session = Depends(get_session),
):
    return _position(session, ALL_TIME, username, game_type)


__all__ = ["router"]
