"""Booster-flag store: progress boosters and daily multiplier tasks."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from ..core.time import today, utcnow
from ..models import Booster, DailyBoosterState, UserBooster
from ..ranking import PROGRESS_BOOSTERS, BoosterFlags

logger = logging.getLogger(__name__)

DAILY_TASKS = ("question", "card", "purchase", "referral")

_BOOSTER_CATALOG: Dict[str, Dict[str, str]] = {
    "play_3_games": {
        "title": "Play 3 games",
        "description": "Finish three games in any category.",
    },
    "score_5000_blockblast": {
        "title": "Block Blast 5,000",
        "description": "Reach 5,000 points in Block Blast.",
    },
    "score_10000_runner": {
        "title": "Crypto Runner 10,000",
        "description": "Reach 10,000 points in Crypto Runner.",
    },
    "first_game": {
        "title": "First game",
        "description": "Play your first game.",
    },
}


def seed_boosters(session: Session) -> int:
    """Insert the progress booster catalog when no boosters exist yet."""

    if session.exec(select(Booster)).first():
        return 0
    for task_type in PROGRESS_BOOSTERS:
        meta = _BOOSTER_CATALOG[task_type]
        session.add(
            Booster(
                task_type=task_type,
                title=meta["title"],
                description=meta["description"],
            )
        )
    session.commit()
    logger.info("Seeded %d boosters", len(PROGRESS_BOOSTERS))
    return len(PROGRESS_BOOSTERS)


def complete_booster(session: Session, user_id: int, booster_id: int) -> UserBooster:
    """Mark ``booster_id`` completed for ``user_id``, creating the row if needed."""

    row = session.exec(
        select(UserBooster).where(
            UserBooster.user_id == user_id,
            UserBooster.booster_id == booster_id,
        )
    ).first()
    if row is None:
        row = UserBooster(user_id=user_id, booster_id=booster_id)
    row.completed = True
    row.completed_at = utcnow()
    session.add(row)
    session.commit()
    session.refresh(row)
    logger.info("Booster %s completed by user %s", booster_id, user_id)
    return row


def user_boosters(session: Session, user_id: int) -> List[Dict[str, Any]]:
    rows = session.exec(
        select(UserBooster, Booster)
        .join(Booster, Booster.id == UserBooster.booster_id)
        .where(UserBooster.user_id == user_id)
    ).all()
    return [
        {
            "id": user_booster.id,
            "user_id": user_booster.user_id,
            "booster_id": user_booster.booster_id,
            "completed": user_booster.completed,
            "completed_at": (
                user_booster.completed_at.isoformat()
                if user_booster.completed_at
                else None
            ),
            "task_type": booster.task_type,
            "title": booster.title,
            "description": booster.description,
            "reward_type": booster.reward_type,
            "reward_value": booster.reward_value,
        }
        for user_booster, booster in rows
    ]


def get_daily_state(
    session: Session, username: str, day: Optional[date] = None
) -> DailyBoosterState:
    """Return the user's state for ``day``; a fresh unsaved row if none exists."""

    day = day or today()
    state = session.exec(
        select(DailyBoosterState).where(
            DailyBoosterState.username == username,
            DailyBoosterState.day == day,
        )
    ).first()
    return state or DailyBoosterState(username=username, day=day)


def complete_task(
    session: Session, username: str, task: str, day: Optional[date] = None
) -> DailyBoosterState:
    if task not in DAILY_TASKS:
        raise ValueError(f"Unknown booster task: {task}")

    state = get_daily_state(session, username, day)
    setattr(state, task, True)
    session.add(state)
    session.commit()
    session.refresh(state)
    logger.info("Daily task %s completed by %s", task, username)
    return state


def add_card_spending(
    session: Session,
    username: str,
    amount: float,
    target: float,
    day: Optional[date] = None,
) -> DailyBoosterState:
    """Accumulate card spending; the ``card`` task completes once ``target`` is met."""

    state = get_daily_state(session, username, day)
    state.card_spent = (state.card_spent or 0.0) + amount
    if state.card_spent >= target:
        state.card = True
    session.add(state)
    session.commit()
    session.refresh(state)
    return state


def flags_for(state: DailyBoosterState) -> BoosterFlags:
    return BoosterFlags(
        question=state.question,
        card=state.card,
        purchase=state.purchase,
        referral=state.referral,
    )


__all__ = [
    "DAILY_TASKS",
    "add_card_spending",
    "complete_booster",
    "complete_task",
    "flags_for",
    "get_daily_state",
    "seed_boosters",
    "user_boosters",
]
