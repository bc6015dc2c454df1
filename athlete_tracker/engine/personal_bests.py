"""
Personal-best extraction.

For every tracked metric, the single best-ever value across a player's full
history and the date it was first achieved.  Run time is "lowest wins",
jumps and sprints are "highest wins"; the sprint best is the highest single
set across every session, not a per-session figure.

Ties go to the earliest session, so the result only depends on the input
(no hidden history).
"""

from __future__ import annotations

from typing import Optional, Sequence

from athlete_tracker.engine.run_time import parse_run_time
from athlete_tracker.engine.sessions import sort_sessions
from athlete_tracker.schemas.insights import BestEntry, PersonalBests, RunTimeBest
from athlete_tracker.schemas.session import TrainingSession

# Jump key -> PersonalBests field
_JUMP_FIELDS: dict[str, str] = {
    "left_single": "best_left_jump",
    "right_single": "best_right_jump",
    "double_single": "best_double_jump",
    "left_triple": "best_left_triple",
    "right_triple": "best_right_triple",
    "double_triple": "best_double_triple",
}


def _best_run_time(sessions: Sequence[TrainingSession]) -> Optional[RunTimeBest]:
    best: Optional[RunTimeBest] = None
    for session in sessions:
        seconds = parse_run_time(session.run_time)
        if seconds is None:
            continue
        if best is None or seconds < best.time:
            best = RunTimeBest(time=seconds, time_str=session.run_time, date=session.date)
    return best


def _best_jump(sessions: Sequence[TrainingSession], jump_type: str) -> Optional[BestEntry]:
    best: Optional[BestEntry] = None
    for session in sessions:
        value = session.broad_jumps.get(jump_type)
        if value is None:
            continue
        if best is None or value > best.value:
            best = BestEntry(value=value, date=session.date)
    return best


def _best_sprint(sessions: Sequence[TrainingSession]) -> Optional[BestEntry]:
    best: Optional[BestEntry] = None
    for session in sessions:
        for reps in session.recorded_sprints:
            if best is None or reps > best.value:
                best = BestEntry(value=reps, date=session.date)
    return best


def get_personal_bests(sessions: Sequence[TrainingSession]) -> Optional[PersonalBests]:
    """Extract personal bests from one player's sessions.

    Returns ``None`` for an empty history; otherwise every metric that was
    recorded at least once has an entry and the rest are ``None``.
    """
    if not sessions:
        return None

    ordered = sort_sessions(sessions)
    jumps = {field: _best_jump(ordered, jump_type) for jump_type, field in _JUMP_FIELDS.items()}
    return PersonalBests(best_run_time=_best_run_time(ordered), best_sprint=_best_sprint(ordered), **jumps, )
