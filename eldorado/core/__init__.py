"""Core configuration and infrastructure helpers."""

from .config import (
    ADMIN_PASS,
    ADMIN_USER,
    ALLOWED_CORS_ORIGINS,
    BOOSTER_FACTOR,
    CARD_SPENDING_TARGET,
    DAILY_LEADERBOARD_LIMIT,
    DB_RESET,
    GLOBAL_LEADERBOARD_LIMIT,
    LOG_LEVEL,
    MAX_LEADERBOARD_LIMIT,
    STATIC_DIR,
)
from .database import engine, get_session
from .logging import setup_logging
from .time import today, utcnow

__all__ = [
    "ADMIN_PASS",
    "ADMIN_USER",
    "ALLOWED_CORS_ORIGINS",
    "BOOSTER_FACTOR",
    "CARD_SPENDING_TARGET",
    "DAILY_LEADERBOARD_LIMIT",
    "DB_RESET",
    "GLOBAL_LEADERBOARD_LIMIT",
    "LOG_LEVEL",
    "MAX_LEADERBOARD_LIMIT",
    "STATIC_DIR",
    "engine",
    "get_session",
    "setup_logging",
    "today",
    "utcnow",
]
