"""Database model for registered players."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class User(SQLModel, table=True):
    """Player identified by a lowercase username."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    username: str = ORMField(index=True, unique=True)
    total_games_played: int = 0
    created_at: datetime = ORMField(default_factory=utcnow)


__all__ = ["User"]
