"""Tests for team leaderboards."""

from athlete_tracker.engine.leaderboard import LEADERBOARD_METRICS, build_leaderboards
from athlete_tracker.schemas.session import Player, TrainingSession


def _session(player_id, date, run_time=None, left=None, sprints=None):
    return TrainingSession.model_validate({
        "playerId": player_id, "date": date, "runTime": run_time,
        "broadJumps": {"leftSingle": left}, "sprints": sprints,
    })


PLAYERS = [
    Player(id="a", name="Avery"),
    Player(id="b", name="Blake"),
    Player(id="c", name="Casey"),
    Player(id="d", name="Devon"),
]

SESSIONS = [
    _session("a", "2024-01-01", "07:30", left=210, sprints=[14.5, 13]),
    _session("a", "2024-02-01", "07:45", left=205),
    _session("b", "2024-01-01", "07:00", left=220),
    _session("c", "2024-01-01", "08:00", sprints=[15, 14]),
]


class TestBuildLeaderboards:
    def test_every_metric_has_a_board(self):
        boards = build_leaderboards(PLAYERS, SESSIONS)
        assert set(boards) == set(LEADERBOARD_METRICS)

    def test_run_time_ascending(self):
        board = build_leaderboards(PLAYERS, SESSIONS)["run_time"]
        assert [e.player_id for e in board] == ["b", "a", "c"]
        assert [e.formatted for e in board] == ["7:00", "7:30", "8:00"]

    def test_jumps_descending(self):
        board = build_leaderboards(PLAYERS, SESSIONS)["left_single"]
        assert [(e.player_name, e.formatted) for e in board] == [("Blake", "220 cm"), ("Avery", "210 cm")]

    def test_sprint_formatting(self):
        board = build_leaderboards(PLAYERS, SESSIONS)["sprint"]
        assert [e.formatted for e in board] == ["15 reps", "14.5 reps"]

    def test_unrecorded_metric_is_empty(self):
        assert build_leaderboards(PLAYERS, SESSIONS)["left_triple"] == []

    def test_players_without_sessions_omitted(self):
        boards = build_leaderboards(PLAYERS, SESSIONS)
        assert all(e.player_id != "d" for board in boards.values() for e in board)

    def test_size_limit(self):
        board = build_leaderboards(PLAYERS, SESSIONS, size=2)["run_time"]
        assert [e.player_id for e in board] == ["b", "a"]
