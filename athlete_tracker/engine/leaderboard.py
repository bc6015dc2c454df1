"""
Personal-best leaderboards across the team.

Each player's personal bests are computed from their own sessions, then
ranked per metric: run time ascending, everything else descending.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from athlete_tracker.core.config import settings
from athlete_tracker.engine.personal_bests import get_personal_bests
from athlete_tracker.engine.run_time import format_run_time
from athlete_tracker.engine.sessions import sessions_for_player
from athlete_tracker.schemas.insights import PersonalBests
from athlete_tracker.schemas.session import Player, TrainingSession
from athlete_tracker.schemas.team import LeaderboardEntry


def _cm(value: float) -> str:
    return f"{value:g} cm"


def _reps(value: float) -> str:
    return f"{value:g} reps"


def _value_of(field: str, attribute: str = "value") -> Callable[[PersonalBests], Optional[float]]:
    def getter(bests: PersonalBests) -> Optional[float]:
        entry = getattr(bests, field)
        return getattr(entry, attribute) if entry is not None else None

    return getter


# metric -> (value getter, formatter, lower is better)
LEADERBOARD_METRICS: dict[str, tuple[Callable[[PersonalBests], Optional[float]], Callable[[float], str], bool]] = {
    "run_time": (_value_of("best_run_time", "time"), format_run_time, True),
    "left_single": (_value_of("best_left_jump"), _cm, False),
    "right_single": (_value_of("best_right_jump"), _cm, False),
    "double_single": (_value_of("best_double_jump"), _cm, False),
    "left_triple": (_value_of("best_left_triple"), _cm, False),
    "right_triple": (_value_of("best_right_triple"), _cm, False),
    "double_triple": (_value_of("best_double_triple"), _cm, False),
    "sprint": (_value_of("best_sprint"), _reps, False),
}


def build_leaderboards(players: Sequence[Player], sessions: Sequence[TrainingSession],
                       size: Optional[int] = None, ) -> dict[str, list[LeaderboardEntry]]:
    """Top *size* players per metric (default ``settings.LEADERBOARD_SIZE``).

    Players without a recorded value for a metric are left off that board.
    Equal values keep player order.
    """
    limit = size if size is not None else settings.LEADERBOARD_SIZE

    team_bests = []
    for player in players:
        bests = get_personal_bests(sessions_for_player(sessions, player.id))
        if bests is not None:
            team_bests.append((player, bests))

    boards: dict[str, list[LeaderboardEntry]] = {}
    for metric, (get_value, fmt, lower_is_better) in LEADERBOARD_METRICS.items():
        entries = []
        for player, bests in team_bests:
            value = get_value(bests)
            if value:
                entries.append(LeaderboardEntry(player_id=player.id, player_name=player.name, value=value,
                                                formatted=fmt(value)))
        entries.sort(key=lambda e: e.value, reverse=not lower_is_better)
        boards[metric] = entries[:limit]
    return boards
