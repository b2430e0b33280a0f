"""Booster endpoints: progress boosters and the daily multiplier tasks."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from ...core import BOOSTER_FACTOR, CARD_SPENDING_TARGET, get_session
from ...models import Booster, DailyBoosterState, User
from ...ranking import active_booster_count, booster_progress, compute_multiplier
from ...services.boosters import (
    DAILY_TASKS,
    add_card_spending,
    complete_booster,
    complete_task,
    flags_for,
    get_daily_state,
    user_boosters,
)
from ...services.daily_question import is_correct, public_question
from ...services.scores import load_user_records

router = APIRouter(prefix="/api/boosters", tags=["boosters"])


def _daily_state_to_dict(state: DailyBoosterState) -> Dict[str, Any]:
    flags = flags_for(state)
    return {
        "username": state.username,
        "day": state.day.isoformat(),
        "question": state.question,
        "card": state.card,
        "card_spent": state.card_spent,
        "purchase": state.purchase,
        "referral": state.referral,
        "multiplier": compute_multiplier(flags, BOOSTER_FACTOR),
        "active_count": active_booster_count(flags),
    }


@router.get("")
def list_boosters(session: Session = Depends(get_session)):
    """List active boosters."""

    return session.exec(select(Booster).where(Booster.active == True)).all()  # noqa: E712


@router.get("/user/{user_id}")
def get_user_boosters(user_id: int, session: Session = Depends(get_session)):
    return user_boosters(session, user_id)


@router.get("/progress/{username}")
def get_booster_progress(username: str, session: Session = Depends(get_session)):
    """Progress of a player towards every progress booster."""

    username = username.lower()
    progress = booster_progress(load_user_records(session, username), username)
    return {name: asdict(item) for name, item in progress.items()}


@router.post("/complete")
def post_complete_booster(body: Dict[str, Any], session: Session = Depends(get_session)):
    user_id = body.get("user_id")
    booster_id = body.get("booster_id")
    if not user_id or not booster_id:
        raise HTTPException(400, "Missing user_id or booster_id")
    if not session.get(User, user_id):
        raise HTTPException(404, "User not found")
    if not session.get(Booster, booster_id):
        raise HTTPException(404, "Booster not found")

    row = complete_booster(session, int(user_id), int(booster_id))
    return {
        "id": row.id,
        "user_id": row.user_id,
        "booster_id": row.booster_id,
        "completed": row.completed,
        "completed_at": row.completed_at.isoformat() if row.completed_at else None,
    }


@router.get("/daily-question")
def get_daily_question():
    """Today's quiz question, without its answer."""

    return public_question()


@router.post("/daily-question/{username}")
def answer_daily_question(
    username: str, body: Dict[str, Any], session: Session = Depends(get_session)
):
    """Check an answer; a correct one completes today's question task."""

    answer = body.get("answer")
    if not isinstance(answer, int) or isinstance(answer, bool):
        raise HTTPException(400, "answer must be an option index")

    username = username.lower()
    correct = is_correct(answer)
    if correct:
        state = complete_task(session, username, "question")
    else:
        state = get_daily_state(session, username)
    return {"correct": correct, "state": _daily_state_to_dict(state)}


@router.get("/daily/{username}")
def get_daily_boosters(username: str, session: Session = Depends(get_session)):
    """Today's booster tasks and the resulting score multiplier."""

    return _daily_state_to_dict(get_daily_state(session, username.lower()))


@router.post("/daily/{username}/tasks/{task}")
def post_daily_task(username: str, task: str, session: Session = Depends(get_session)):
    if task not in DAILY_TASKS:
        raise HTTPException(404, "Unknown booster task")
    return _daily_state_to_dict(complete_task(session, username.lower(), task))


@router.post("/daily/{username}/card-spending")
def post_card_spending(
    username: str, body: Dict[str, Any], session: Session = Depends(get_session)
):
    amount = body.get("amount")
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or amount <= 0:
        raise HTTPException(400, "amount must be a positive number")
    state = add_card_spending(
        session, username.lower(), float(amount), CARD_SPENDING_TARGET
    )
    return _daily_state_to_dict(state)


__all__ = ["router"]
