"""Pure ranking engine."""

from .engine import (
    ALL_TIME,
    PROGRESS_BOOSTERS,
    TODAY,
    BoosterFlags,
    BoosterProgress,
    LeaderboardEntry,
    RankResult,
    ScoreRecord,
    Scope,
    active_booster_count,
    booster_progress,
    compute_leaderboard,
    compute_multiplier,
    compute_rank,
)

__all__ = [
    "ALL_TIME",
    "PROGRESS_BOOSTERS",
    "TODAY",
    "BoosterFlags",
    "BoosterProgress",
    "LeaderboardEntry",
    "RankResult",
    "ScoreRecord",
    "Scope",
    "active_booster_count",
    "booster_progress",
    "compute_leaderboard",
    "compute_multiplier",
    "compute_rank",
]
