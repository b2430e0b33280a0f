"""
Tests for the pure ranking engine.
"""

from datetime import date, timedelta
from itertools import islice, permutations

import pytest

from eldorado.ranking import (
    ALL_TIME,
    TODAY,
    BoosterFlags,
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

DAY = date(2024, 3, 14)
YESTERDAY = DAY - timedelta(days=1)


def rec(username, value, category="block_blast", day=DAY):
    return ScoreRecord(username=username, value=value, submitted_on=day, category=category)


@pytest.fixture
def basic_records():
    return [rec("alice", 5000), rec("bob", 7000), rec("alice", 9000)]


@pytest.fixture
def mixed_records():
    return [
        rec("alice", 300, "block_blast"),
        rec("bob", 900, "crypto_runner"),
        rec("carol", 500, "block_blast"),
        rec("carol", 800, "crypto_runner", day=YESTERDAY),
        rec("dave", 500, "block_blast"),
        rec("erin", 100, "crypto_runner"),
        rec("alice", 1200, "crypto_runner", day=YESTERDAY),
    ]


class TestComputeLeaderboard:
    """Tests for compute_leaderboard."""

    def test_best_score_per_user(self, basic_records):
        board = compute_leaderboard(basic_records, Scope(), 10)
        assert board == [
            LeaderboardEntry("alice", 9000, 1),
            LeaderboardEntry("bob", 7000, 2),
        ]

    def test_limit_truncates(self, basic_records):
        board = compute_leaderboard(basic_records, Scope(), 1)
        assert board == [LeaderboardEntry("alice", 9000, 1)]

    @pytest.mark.parametrize("limit", [0, -3])
    def test_non_positive_limit_is_empty(self, basic_records, limit):
        assert compute_leaderboard(basic_records, Scope(), limit) == []

    def test_empty_records(self):
        assert compute_leaderboard([], Scope(), 10) == []

    def test_today_excludes_other_days(self, mixed_records):
        scope = Scope(date_filter=TODAY, as_of=DAY)
        board = compute_leaderboard(mixed_records, scope, 10)
        assert [e.username for e in board] == ["bob", "carol", "dave", "alice", "erin"]
        assert [e.value for e in board] == [900, 500, 500, 300, 100]

    def test_all_time_includes_every_day(self, mixed_records):
        board = compute_leaderboard(mixed_records, Scope(date_filter=ALL_TIME), 10)
        assert board[0] == LeaderboardEntry("alice", 1200, 1)
        assert board[1] == LeaderboardEntry("bob", 900, 2)
        assert board[2] == LeaderboardEntry("carol", 800, 3)

    def test_category_filter(self, mixed_records):
        scope = Scope(date_filter=TODAY, category="block_blast", as_of=DAY)
        board = compute_leaderboard(mixed_records, scope, 10)
        assert [(e.username, e.value) for e in board] == [
            ("carol", 500),
            ("dave", 500),
            ("alice", 300),
        ]

    def test_unknown_category_is_empty(self, mixed_records):
        assert compute_leaderboard(mixed_records, Scope(category="chess"), 10) == []

    def test_ties_broken_by_username(self):
        records = [rec("zed", 10), rec("amy", 10), rec("mia", 10)]
        board = compute_leaderboard(records, Scope(), 10)
        assert [e.username for e in board] == ["amy", "mia", "zed"]
        assert [e.rank for e in board] == [1, 2, 3]

    def test_order_independent_of_input_order(self, mixed_records):
        expected = compute_leaderboard(mixed_records, Scope(), 10)
        for shuffled in islice(permutations(mixed_records), 50):
            assert compute_leaderboard(shuffled, Scope(), 10) == expected

    def test_properties(self, mixed_records):
        for limit in range(1, 8):
            board = compute_leaderboard(mixed_records, Scope(), limit)
            usernames = [e.username for e in board]
            assert len(board) <= limit
            assert len(board) <= len({r.username for r in mixed_records})
            assert len(usernames) == len(set(usernames))
            assert all(a.value >= b.value for a, b in zip(board, board[1:]))
            assert [e.rank for e in board] == list(range(1, len(board) + 1))

    def test_idempotent(self, mixed_records):
        scope = Scope(date_filter=TODAY, as_of=DAY)
        assert compute_leaderboard(mixed_records, scope, 3) == compute_leaderboard(
            mixed_records, scope, 3
        )

    def test_accepts_generator(self, basic_records):
        board = compute_leaderboard((r for r in basic_records), Scope(), 10)
        assert len(board) == 2


class TestComputeRank:
    """Tests for compute_rank."""

    def test_absent_user(self, basic_records):
        assert compute_rank(basic_records, Scope(), "carol") == RankResult(rank=None, value=0)

    def test_present_user(self, basic_records):
        assert compute_rank(basic_records, Scope(), "bob") == RankResult(rank=2, value=7000)

    def test_rank_ignores_page_size(self, mixed_records):
        scope = Scope(date_filter=TODAY, as_of=DAY)
        assert compute_rank(mixed_records, scope, "erin") == RankResult(rank=5, value=100)

    def test_scope_applies(self, mixed_records):
        scope = Scope(date_filter=TODAY, category="crypto_runner", as_of=DAY)
        assert compute_rank(mixed_records, scope, "alice").rank is None
        assert compute_rank(mixed_records, scope, "erin") == RankResult(rank=2, value=100)

    def test_consistent_with_leaderboard(self, mixed_records):
        scope = Scope(date_filter=TODAY, as_of=DAY)
        board = compute_leaderboard(mixed_records, scope, 100)
        for entry in board:
            result = compute_rank(mixed_records, scope, entry.username)
            assert result == RankResult(rank=entry.rank, value=entry.value)

    def test_rank_counts_strictly_better_users(self):
        records = [rec("a", 50), rec("b", 40), rec("c", 30), rec("a", 10)]
        best = {"a": 50, "b": 40, "c": 30}
        for username, value in best.items():
            better = [other for other, v in best.items() if v > value]
            assert compute_rank(records, Scope(), username).rank == 1 + len(better)


class TestScope:
    def test_unknown_date_filter(self):
        with pytest.raises(ValueError):
            Scope(date_filter="weekly")

    def test_today_needs_date(self):
        with pytest.raises(ValueError):
            Scope(date_filter=TODAY)


class TestComputeMultiplier:
    """Tests for compute_multiplier."""

    def test_no_flags(self):
        assert compute_multiplier(BoosterFlags()) == 1.0

    def test_single_flag(self):
        assert compute_multiplier(BoosterFlags(referral=True)) == 1.1

    def test_all_flags(self):
        flags = BoosterFlags(question=True, card=True, purchase=True, referral=True)
        assert compute_multiplier(flags) == 1.4641

    def test_custom_factor(self):
        assert compute_multiplier(BoosterFlags(question=True, card=True), factor=2.0) == 4.0

    def test_bounds_and_monotonic(self):
        previous = 1.0
        for count in range(5):
            values = [True] * count + [False] * (4 - count)
            value = compute_multiplier(BoosterFlags(*values))
            assert 1.0 <= value <= round(1.1 ** 4, 4)
            assert value >= previous
            previous = value

    def test_active_count(self):
        assert active_booster_count(BoosterFlags()) == 0
        assert active_booster_count(BoosterFlags(question=True, purchase=True)) == 2


class TestBoosterProgress:
    """Tests for booster_progress."""

    def test_no_records(self):
        progress = booster_progress([], "alice")
        assert progress["play_3_games"].current == 0
        assert progress["first_game"].done is False
        assert progress["score_5000_blockblast"].current == 0
        assert not any(item.done for item in progress.values())

    def test_counts_and_best(self):
        records = [
            rec("alice", 4000, "block_blast"),
            rec("alice", 6000, "block_blast", day=YESTERDAY),
            rec("alice", 2000, "crypto_runner"),
            rec("bob", 50000, "crypto_runner"),
        ]
        progress = booster_progress(records, "alice")
        assert progress["play_3_games"].current == 3
        assert progress["play_3_games"].done is True
        assert progress["score_5000_blockblast"].current == 6000
        assert progress["score_5000_blockblast"].done is True
        assert progress["score_10000_runner"].current == 2000
        assert progress["score_10000_runner"].target == 10000
        assert progress["score_10000_runner"].done is False
        assert progress["first_game"].current == 1

    def test_negative_best_score_floors_at_zero(self):
        progress = booster_progress([rec("alice", -50, "block_blast")], "alice")
        assert progress["score_5000_blockblast"].current == 0
        assert progress["score_5000_blockblast"].done is False
        assert progress["play_3_games"].current == 1


class TestBestRecord:
    def test_entry_keeps_best_record(self, mixed_records):
        board = compute_leaderboard(mixed_records, Scope(), 10)
        assert board[0].best.category == "crypto_runner"
        assert board[0].best.submitted_on == YESTERDAY

    def test_rank_keeps_best_record(self, mixed_records):
        result = compute_rank(mixed_records, Scope(), "carol")
        assert result.best.value == 800
        assert compute_rank(mixed_records, Scope(), "zoe").best is None
