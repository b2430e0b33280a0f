"""Leaderboard ranking, rank lookup and booster arithmetic.

Everything in this module is a pure function of its arguments: records are
read-only snapshots handed in by the score store, and booster flags are
passed explicitly rather than read from any shared state.

Ordering policy: best value descending, ties broken by username ascending so
that the leaderboard and a single user's rank always agree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

TODAY = "today"
ALL_TIME = "all-time"
DATE_FILTERS = (TODAY, ALL_TIME)

DEFAULT_BOOSTER_FACTOR = 1.1


@dataclass(frozen=True)
class ScoreRecord:
    """One game session as seen by the engine."""

    username: str
    value: float
    submitted_on: date
    category: Optional[str] = None
    coins: int = 0


@dataclass(frozen=True)
class Scope:
    """Date and category filter applied before ranking."""

    date_filter: str = ALL_TIME
    category: Optional[str] = None
    as_of: Optional[date] = None

    def __post_init__(self) -> None:
        if self.date_filter not in DATE_FILTERS:
            raise ValueError(f"Unknown date filter: {self.date_filter!r}")
        if self.date_filter == TODAY and self.as_of is None:
            raise ValueError("A 'today' scope needs an as_of date")

    def matches(self, record: ScoreRecord) -> bool:
        if self.date_filter == TODAY and record.submitted_on != self.as_of:
            return False
        if self.category is not None and record.category != self.category:
            return False
        return True


@dataclass(frozen=True)
class LeaderboardEntry:
    username: str
    value: float
    rank: int
    best: Optional[ScoreRecord] = field(default=None, compare=False)


@dataclass(frozen=True)
class RankResult:
    rank: Optional[int]
    value: float
    best: Optional[ScoreRecord] = field(default=None, compare=False)


@dataclass(frozen=True)
class BoosterFlags:
    """Daily booster conditions, in the order they are applied."""

    question: bool = False
    card: bool = False
    purchase: bool = False
    referral: bool = False

    def as_tuple(self) -> Tuple[bool, bool, bool, bool]:
        return (self.question, self.card, self.purchase, self.referral)


@dataclass(frozen=True)
class BoosterProgress:
    current: float
    target: float
    done: bool


def _best_by_user(records: Iterable[ScoreRecord], scope: Scope) -> Dict[str, ScoreRecord]:
    best: Dict[str, ScoreRecord] = {}
    for record in records:
        if not scope.matches(record):
            continue
        current = best.get(record.username)
        if current is None or record.value > current.value:
            best[record.username] = record
    return best


def _ordered(records: Iterable[ScoreRecord], scope: Scope) -> List[ScoreRecord]:
    best = _best_by_user(records, scope)
    return sorted(best.values(), key=lambda record: (-record.value, record.username))


def compute_leaderboard(
    records: Iterable[ScoreRecord], scope: Scope, limit: int
) -> List[LeaderboardEntry]:
    """Return the best value per user in ``scope``, ranked, at most ``limit`` long.

    A non-positive ``limit`` yields an empty leaderboard.
    """

    if limit <= 0:
        return []
    ordered = _ordered(records, scope)
    return [
        LeaderboardEntry(
            username=record.username, value=record.value, rank=position, best=record
        )
        for position, record in enumerate(ordered[:limit], start=1)
    ]


def compute_rank(
    records: Iterable[ScoreRecord], scope: Scope, username: str
) -> RankResult:
    """Return ``username``'s position in the untruncated leaderboard of ``scope``."""

    for position, record in enumerate(_ordered(records, scope), start=1):
        if record.username == username:
            return RankResult(rank=position, value=record.value, best=record)
    return RankResult(rank=None, value=0)


def compute_multiplier(
    flags: BoosterFlags, factor: float = DEFAULT_BOOSTER_FACTOR
) -> float:
    multiplier = 1.0
    for enabled in flags.as_tuple():
        if enabled:
            multiplier *= factor
    return round(multiplier, 4)


def active_booster_count(flags: BoosterFlags) -> int:
    return sum(1 for enabled in flags.as_tuple() if enabled)


# name -> (category or None for "any", measure, target)
PROGRESS_BOOSTERS: Dict[str, Tuple[Optional[str], str, int]] = {
    "play_3_games": (None, "games", 3),
    "score_5000_blockblast": ("block_blast", "best", 5000),
    "score_10000_runner": ("crypto_runner", "best", 10000),
    "first_game": (None, "played", 1),
}


def booster_progress(
    records: Iterable[ScoreRecord], username: str
) -> Dict[str, BoosterProgress]:
    """Measure ``username``'s records against every progress booster target."""

    own = [record for record in records if record.username == username]
    progress: Dict[str, BoosterProgress] = {}
    for name, (category, measure, target) in PROGRESS_BOOSTERS.items():
        if measure == "games":
            current: float = len(own)
        elif measure == "played":
            current = 1 if own else 0
        else:
            # Floored at zero, negative scores never count as progress.
            current = max(
                [0, *(record.value for record in own if record.category == category)]
            )
        progress[name] = BoosterProgress(
            current=current, target=target, done=current >= target
        )
    return progress


__all__ = [
    "ALL_TIME",
    "DATE_FILTERS",
    "DEFAULT_BOOSTER_FACTOR",
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
