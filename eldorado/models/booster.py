"""Database models for boosters and their per-user completion state."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import today


class Booster(SQLModel, table=True):
    """Progress task that can be completed once per user."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    task_type: str = ORMField(index=True, unique=True)
    title: str
    description: Optional[str] = None
    reward_type: str = "multiplier"
    reward_value: float = 1.1
    active: bool = True


class UserBooster(SQLModel, table=True):
    __tablename__ = "user_booster"
    __table_args__ = (UniqueConstraint("user_id", "booster_id"),)

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: int = ORMField(foreign_key="user.id", index=True)
    booster_id: int = ORMField(foreign_key="booster.id")
    completed: bool = False
    completed_at: Optional[datetime] = None


class DailyBoosterState(SQLModel, table=True):
    """Daily multiplier tasks a user has completed on ``day``."""

    __tablename__ = "daily_booster_state"
    __table_args__ = (UniqueConstraint("username", "day"),)

    id: Optional[int] = ORMField(default=None, primary_key=True)
    username: str = ORMField(index=True)
    day: date = ORMField(default_factory=today)
    question: bool = False
    card: bool = False
    card_spent: float = 0.0
    purchase: bool = False
    referral: bool = False


__all__ = ["Booster", "DailyBoosterState", "UserBooster"]
