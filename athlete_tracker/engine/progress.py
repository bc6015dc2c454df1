"""
Monthly progress tracking.

Groups one player's sessions by calendar month and averages a single
metric per month, with the direction of change against the previous month.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from athlete_tracker.core.dates import format_month_label, month_key
from athlete_tracker.engine.balance import session_balance
from athlete_tracker.engine.run_time import format_run_time, parse_run_time
from athlete_tracker.engine.sessions import sort_sessions
from athlete_tracker.engine.stats import mean, round_half_up
from athlete_tracker.engine.trends import DOWN, FLAT, UP
from athlete_tracker.schemas.insights import NOT_AVAILABLE
from athlete_tracker.schemas.session import JUMP_TYPES, TrainingSession
from athlete_tracker.schemas.team import MonthlyMetric

FIRST_MONTH = "—"

LOWER = "lower"
HIGHER = "higher"

Extractor = Callable[[TrainingSession], list[float]]


def _run_times(session: TrainingSession) -> list[float]:
    seconds = parse_run_time(session.run_time)
    return [] if seconds is None else [seconds]


def _jump(jump_type: str) -> Extractor:
    def extract(session: TrainingSession) -> list[float]:
        value = session.broad_jumps.get(jump_type)
        return [] if value is None else [value]

    return extract


def _balance(session: TrainingSession) -> list[float]:
    balance = session_balance(session)
    return [] if balance is None else [balance]


def _metric(metric: str) -> Optional[tuple[Extractor, Callable[[float], str], str]]:
    """``(extractor, formatter, direction)`` for *metric*, ``None`` if unknown."""
    if metric == "run_time":
        return _run_times, format_run_time, LOWER
    if metric in JUMP_TYPES:
        return _jump(metric), lambda v: f"{int(round_half_up(v))} cm", HIGHER
    if metric == "sprint":
        return (lambda s: s.recorded_sprints), lambda v: f"{v:.1f} reps", HIGHER
    if metric == "balance":
        return _balance, lambda v: f"{int(round_half_up(v))}%", HIGHER
    return None


def _arrow(current: Optional[float], previous: Optional[float], direction: Optional[str]) -> tuple[str, Optional[bool]]:
    if not current or not previous or current == previous or direction is None:
        return FLAT, None
    improving = current < previous if direction == LOWER else current > previous
    return (UP if current > previous else DOWN), improving


def monthly_progress(sessions: Sequence[TrainingSession], metric: str) -> list[MonthlyMetric]:
    """Monthly averages of *metric* for one player, oldest month first.

    *metric* is ``run_time``, a jump key, ``sprint`` or ``balance``.  An
    unknown metric, or a month without data for it, yields ``N/A``.
    """
    definition = _metric(metric)

    months: dict[str, list[TrainingSession]] = {}
    for session in sort_sessions(sessions):
        months.setdefault(month_key(session.date), []).append(session)

    results: list[MonthlyMetric] = []
    previous: Optional[float] = None
    for key, month_sessions in months.items():
        value, formatted, direction = None, NOT_AVAILABLE, None
        if definition is not None:
            extract, fmt, direction = definition
            value = mean(v for s in month_sessions for v in extract(s))
            if value is not None:
                formatted = fmt(value)

        if results:
            arrow, improving = _arrow(value, previous, direction)
        else:
            arrow, improving = FIRST_MONTH, None

        results.append(MonthlyMetric(month=key, label=format_month_label(month_sessions[0].date), value=value,
                                     formatted=formatted, session_count=len(month_sessions), direction=direction,
                                     arrow=arrow, is_improving=improving, ))
        previous = value
    return results
