"""Tests for sprint fatigue analysis."""

import pytest

from athlete_tracker.engine.fatigue import (
    RECOMMENDATIONS,
    analyze_fatigue,
    analyze_session_fatigue,
    sprint_dropoff,
)
from athlete_tracker.schemas.session import TrainingSession


def _session(sprints, date="2024-01-01"):
    return TrainingSession.model_validate({"playerId": "p1", "date": date, "sprints": sprints})


class TestSprintDropoff:
    def test_first_to_last(self):
        assert sprint_dropoff([10, 10, 8]) == pytest.approx(-20.0)

    def test_improvement_is_positive(self):
        assert sprint_dropoff([8, 9, 10]) == pytest.approx(25.0)

    @pytest.mark.parametrize("sprints", [[], [12]])
    def test_needs_two_sets(self, sprints):
        assert sprint_dropoff(sprints) is None


class TestSessionFatigue:
    def test_skipped_leading_sets(self):
        profile = analyze_session_fatigue(_session([0, 0, 12, 10, 9, 7]))
        assert profile.dropoff == pytest.approx(-41.6667, abs=1e-3)
        assert profile.consistency == pytest.approx(58.333, abs=1e-3)
        assert profile.peak_position == 1

    def test_peak_position_among_recorded_sets(self):
        profile = analyze_session_fatigue(_session([0, 8, 10, 12, 9, 0]))
        assert profile.peak_position == 3
        assert profile.dropoff == pytest.approx(12.5)
        assert profile.consistency == pytest.approx(8 / 12 * 100)

    def test_first_peak_wins(self):
        assert analyze_session_fatigue(_session([10, 12, 12, 9])).peak_position == 2

    def test_single_set_does_not_qualify(self):
        assert analyze_session_fatigue(_session([0, 0, 12, 0, 0, 0])) is None


class TestAnalyzeFatigue:
    def test_single_session(self):
        metrics = analyze_fatigue([_session([0, 0, 12, 10, 9, 7])])
        assert metrics.avg_dropoff == pytest.approx(-41.7)
        assert metrics.avg_consistency == pytest.approx(58.3)
        assert metrics.peak_timing == pytest.approx(1.0)
        assert metrics.classification.level == "Needs Work"
        assert metrics.fatigue_resistance == "Low"
        assert metrics.recommendation == RECOMMENDATIONS["Low"]
        assert metrics.sessions_analyzed == 1

    def test_averages_over_sessions(self):
        metrics = analyze_fatigue([
            _session([10, 10, 10, 10, 10, 8]),
            _session([25, 25, 25, 25, 25, 24], "2024-01-08"),
        ])
        # dropoffs -20 and -4
        assert metrics.avg_dropoff == pytest.approx(-12.0)
        assert metrics.avg_consistency == pytest.approx(88.0)
        assert metrics.fatigue_resistance == "Moderate"
        assert metrics.sessions_analyzed == 2
        assert [p.date.day for p in metrics.sessions] == [1, 8]

    def test_flat_sprints_are_excellent(self):
        metrics = analyze_fatigue([_session([10] * 6)])
        assert metrics.avg_dropoff == 0
        assert metrics.avg_consistency == pytest.approx(100.0)
        assert metrics.fatigue_resistance == "Excellent"

    @pytest.mark.parametrize("sessions", [
        [],
        [_session([12])],
        [_session(None)],
    ])
    def test_no_qualifying_sessions(self, sessions):
        metrics = analyze_fatigue(sessions)
        assert metrics.fatigue_resistance == "N/A"
        assert metrics.peak_timing == "N/A"
        assert metrics.avg_dropoff == 0
        assert metrics.avg_consistency == 0
        assert metrics.sessions_analyzed == 0
        assert metrics.recommendation == RECOMMENDATIONS["N/A"]
