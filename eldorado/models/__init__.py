"""Database model exports."""

from .booster import Booster, DailyBoosterState, UserBooster
from .score import Score
from .user import User

__all__ = [
    "Booster",
    "DailyBoosterState",
    "Score",
    "User",
    "UserBooster",
]
