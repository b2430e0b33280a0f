"""Score store: persistence of game sessions and ranking snapshots."""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from sqlmodel import Session, func, select

from ..core.time import today
from ..models import Score, User
from ..ranking import TODAY, ScoreRecord, Scope, compute_multiplier
from ..ranking.engine import DEFAULT_BOOSTER_FACTOR
from .boosters import flags_for, get_daily_state

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


def category_from_query(game_type: Optional[str]) -> Optional[str]:
    """Map the ``game_type`` query value to an engine category (``all`` pools them)."""

    if not game_type or game_type == ALL_CATEGORIES:
        return None
    return game_type


def make_scope(
    date_filter: str, game_type: Optional[str], as_of: Optional[date] = None
) -> Scope:
    if date_filter == TODAY and as_of is None:
        as_of = today()
    return Scope(
        date_filter=date_filter, category=category_from_query(game_type), as_of=as_of
    )


def to_record(score: Score) -> ScoreRecord:
    return ScoreRecord(
        username=score.username,
        value=score.score,
        submitted_on=score.day,
        category=score.game_type,
        coins=score.coins,
    )


def load_score_records(session: Session, scope: Scope) -> List[ScoreRecord]:
    """Read every score row in ``scope`` with a single statement."""

    query = select(Score)
    if scope.date_filter == TODAY:
        query = query.where(Score.day == scope.as_of)
    if scope.category is not None:
        query = query.where(Score.game_type == scope.category)
    return [to_record(score) for score in session.exec(query).all()]


def load_user_records(session: Session, username: str) -> List[ScoreRecord]:
    scores = session.exec(select(Score).where(Score.username == username)).all()
    return [to_record(score) for score in scores]


def best_score(session: Session, username: str, game_type: str) -> int:
    best = session.exec(
        select(func.max(Score.score)).where(
            Score.username == username,
            Score.game_type == game_type,
        )
    ).one()
    return int(best or 0)


def submit_score(
    session: Session,
    user: User,
    game_type: str,
    raw_score: int,
    coins: int = 0,
    apply_boosters: bool = False,
    factor: float = DEFAULT_BOOSTER_FACTOR,
) -> Score:
    """Insert a score for ``user`` and bump their games-played counter."""

    multiplier = 1.0
    if apply_boosters:
        state = get_daily_state(session, user.username)
        multiplier = compute_multiplier(flags_for(state), factor)

    score = Score(
        user_id=user.id,
        username=user.username,
        game_type=game_type,
        raw_score=raw_score,
        multiplier=multiplier,
        score=round(raw_score * multiplier),
        coins=coins,
    )
    user.total_games_played += 1
    session.add(score)
    session.add(user)
    session.commit()
    session.refresh(score)

    logger.info(
        "Score submitted: user=%s game=%s raw=%s multiplier=%s final=%s",
        user.username,
        game_type,
        raw_score,
        multiplier,
        score.score,
    )
    return score


def score_to_dict(score: Score) -> dict:
    return {
        "id": score.id,
        "user_id": score.user_id,
        "username": score.username,
        "game_type": score.game_type,
        "score": score.score,
        "raw_score": score.raw_score,
        "multiplier": score.multiplier,
        "coins": score.coins,
        "date": score.day.isoformat(),
        "created_at": score.created_at.isoformat(),
    }


__all__ = [
    "ALL_CATEGORIES",
    "best_score",
    "category_from_query",
    "load_score_records",
    "load_user_records",
    "make_scope",
    "score_to_dict",
    "submit_score",
    "to_record",
]
