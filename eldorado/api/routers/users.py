"""Player registration and lookup endpoints."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ...core import get_session
from ...models import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])

_USERNAME_RE = re.compile(r"[a-zA-Z0-9_]{3,20}")


def user_to_dict(user: User) -> Dict[str, Any]:
    return {
        "id": user.id,
        "username": user.username,
        "total_games_played": user.total_games_played,
        "created_at": user.created_at.isoformat() if user.created_at else None,
    }


def find_user(session: Session, username: str) -> User | None:
    return session.exec(select(User).where(User.username == username.lower())).first()


@router.get("/check/{username}")
def check_username(username: str, session: Session = Depends(get_session)):
    """Report whether a username is still free."""

    return {"available": find_user(session, username) is None}


@router.post("")
def create_user(body: Dict[str, Any], session: Session = Depends(get_session)):
    """Register a new player."""

    username = body.get("username")
    if not isinstance(username, str) or not _USERNAME_RE.fullmatch(username):
        raise HTTPException(400, "Invalid username")

    user = User(username=username.lower())
    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise HTTPException(409, "Username already taken")
    session.refresh(user)

    logger.info("User created: %s", user.username)
    return user_to_dict(user)


@router.get("/{username}")
def get_user(username: str, session: Session = Depends(get_session)):
    """Get a player by username."""

    user = find_user(session, username)
    if not user:
        raise HTTPException(404, "User not found")
    return user_to_dict(user)


__all__ = ["find_user", "router", "user_to_dict"]
