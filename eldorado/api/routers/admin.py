"""Administrative maintenance endpoints."""

from __future__ import annotations

import logging
import secrets

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlmodel import Session, select

from ...core import ADMIN_PASS, ADMIN_USER, get_session
from ...models import DailyBoosterState, Score, User, UserBooster

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])

security = HTTPBasic()


def require_admin(credentials: HTTPBasicCredentials = Depends(security)) -> bool:
    ok_user = secrets.compare_digest(credentials.username, ADMIN_USER)
    ok_pass = secrets.compare_digest(credentials.password, ADMIN_PASS)
    if not (ok_user and ok_pass):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return True


@router.post("/reset")
def reset_database(
    _admin: bool = Depends(require_admin), session: Session = Depends(get_session)
):
    """Clear scores and booster progress, and zero every game counter."""

    cleared = 0
    for model in (Score, UserBooster, DailyBoosterState):
        for row in session.exec(select(model)).all():
            session.delete(row)
            cleared += 1

    for user in session.exec(select(User)).all():
        user.total_games_played = 0
        session.add(user)
    session.commit()

    logger.warning("Database reset by admin: %d rows cleared", cleared)
    return {
        "ok": True,
        "message": "Database reset: scores, boosters cleared, game counts reset.",
    }


__all__ = ["require_admin", "router"]
