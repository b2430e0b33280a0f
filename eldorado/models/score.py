"""Database model for submitted game scores."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import today, utcnow


class Score(SQLModel, table=True):
    """One finished game session. Rows are never updated after insert."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: Optional[int] = ORMField(default=None, foreign_key="user.id", index=True)
    username: str = ORMField(index=True)
    game_type: str = ORMField(index=True)
    score: int
    raw_score: int
    multiplier: float = 1.0
    coins: int = 0
    day: date = ORMField(default_factory=today, index=True)
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["Score"]
