"""Tests for recent-vs-history trends."""

import pytest

from athlete_tracker.engine.trends import (
    DOWN,
    FLAT,
    UP,
    compute_trend,
    jump_balance_trend,
    run_time_trend,
)
from athlete_tracker.schemas.session import TrainingSession


def _sessions(run_times=None, jumps=None):
    count = len(run_times or jumps)
    sessions = []
    for i in range(count):
        raw = {"playerId": "p1", "date": f"2024-01-{i + 1:02d}"}
        if run_times:
            raw["runTime"] = run_times[i]
        if jumps:
            raw["broadJumps"] = {"leftSingle": jumps[i][0], "rightSingle": jumps[i][1]}
        sessions.append(TrainingSession.model_validate(raw))
    return sessions


def _assert_neutral(trend):
    assert trend.change == "0.0"
    assert trend.arrow == FLAT
    assert trend.is_improving is None


class TestComputeTrend:
    def test_empty_recent(self):
        _assert_neutral(compute_trend([], [450, 460], lower_is_better=True))

    def test_zero_history_average(self):
        _assert_neutral(compute_trend([1], [0], lower_is_better=False))

    def test_higher_is_better(self):
        trend = compute_trend([110], [100], lower_is_better=False)
        assert trend.change == "10.0"
        assert trend.arrow == UP
        assert trend.is_improving is True


class TestRunTimeTrend:
    def test_short_history_is_neutral(self):
        _assert_neutral(run_time_trend(_sessions(["09:00", "07:00", "07:00", "07:00", "07:00"])))

    def test_identical_times_are_neutral(self):
        _assert_neutral(run_time_trend(_sessions(["07:30"] * 6)))

    def test_faster_recent_is_improving(self):
        trend = run_time_trend(_sessions(["09:00"] + ["07:00"] * 5))
        # all avg 440, recent avg 420
        assert trend.change == "4.5"
        assert trend.arrow == DOWN
        assert trend.is_improving is True

    def test_slower_recent_is_not_improving(self):
        trend = run_time_trend(_sessions(["07:00"] + ["09:00"] * 5))
        # all avg 520, recent avg 540
        assert trend.change == "3.8"
        assert trend.arrow == UP
        assert trend.is_improving is False

    def test_unsorted_input(self):
        sessions = _sessions(["09:00"] + ["07:00"] * 5)
        assert run_time_trend(list(reversed(sessions))) == run_time_trend(sessions)

    def test_recent_window_without_data(self):
        sessions = _sessions(["07:00", "", "", "", "", ""])
        _assert_neutral(run_time_trend(sessions))

    @pytest.mark.parametrize("window", [1, 2])
    def test_custom_window(self, window):
        trend = run_time_trend(_sessions(["08:00", "07:00", "07:00"]), window=window)
        assert trend.arrow == DOWN
        assert trend.is_improving is True


class TestJumpBalanceTrend:
    def test_improving_balance(self):
        trend = jump_balance_trend(_sessions(jumps=[(200, 160)] + [(200, 200)] * 5))
        # all avg 96.67, recent avg 100
        assert trend.change == "3.4"
        assert trend.arrow == UP
        assert trend.is_improving is True

    def test_one_sided_sessions_ignored(self):
        _assert_neutral(jump_balance_trend(_sessions(jumps=[(200, None)] * 6)))
