"""Service layer helpers."""

from .boosters import (
    DAILY_TASKS,
    add_card_spending,
    complete_booster,
    complete_task,
    flags_for,
    get_daily_state,
    seed_boosters,
    user_boosters,
)
from .daily_question import is_correct, public_question, question_for
from .scores import (
    best_score,
    category_from_query,
    load_score_records,
    load_user_records,
    make_scope,
    score_to_dict,
    submit_score,
)

__all__ = [
    "DAILY_TASKS",
    "add_card_spending",
    "best_score",
    "category_from_query",
    "complete_booster",
    "complete_task",
    "flags_for",
    "get_daily_state",
    "is_correct",
    "load_score_records",
    "load_user_records",
    "make_scope",
    "public_question",
    "question_for",
    "score_to_dict",
    "seed_boosters",
    "submit_score",
    "user_boosters",
]
