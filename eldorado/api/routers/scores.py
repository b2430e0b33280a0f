"""Score submission endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from ...core import BOOSTER_FACTOR, get_session
from ...services.scores import best_score, score_to_dict, submit_score
from .users import find_user

router = APIRouter(prefix="/api/scores", tags=["scores"])


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise HTTPException(400, f"{field} must be a number")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise HTTPException(400, f"{field} must be a number")


@router.post("")
def create_score(body: Dict[str, Any], session: Session = Depends(get_session)):
    """Record a finished game for an existing player."""

    username = body.get("username")
    game_type = body.get("game_type")
    raw_score = body.get("score")
    if not username or not game_type or raw_score is None:
        raise HTTPException(400, "Missing fields")

    user = find_user(session, str(username))
    if not user:
        raise HTTPException(404, "User not found")

    score = submit_score(
        session,
        user,
        game_type=str(game_type),
        raw_score=_as_int(raw_score, "score"),
        coins=_as_int(body.get("coins") or 0, "coins"),
        apply_boosters=bool(body.get("apply_boosters")),
        factor=BOOSTER_FACTOR,
    )
    return score_to_dict(score)


@router.get("/best")
def get_best_score(
    username: str | None = None,
    game_type: str | None = None,
    session: Session = Depends(get_session),
):
    """Best score of a player in one game type, 0 when they never played it."""

    if not username or not game_type:
        raise HTTPException(400, "Missing username or game_type")
    return {"score": best_score(session, username.lower(), game_type)}


__all__ = ["router"]
