"""
Trend computation.

A trend compares the average of the most recent sessions with the
all-time average to show directional momentum:

    change = |recent_avg - all_avg| / all_avg × 100

Trends only activate once the history is longer than the recent window;
until then (or when either window has no qualifying data) the trend is
neutral.  A change that rounds to ``0.0`` is also neutral: arrow ``→`` and
``is_improving = None``, never ``False``.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from athlete_tracker.engine.balance import session_balance
from athlete_tracker.engine.run_time import parse_run_time
from athlete_tracker.engine.sessions import sort_sessions
from athlete_tracker.engine.stats import mean
from athlete_tracker.schemas.insights import Trend
from athlete_tracker.schemas.session import TrainingSession

DEFAULT_WINDOW = 5

UP = "↑"
DOWN = "↓"
FLAT = "→"


def neutral_trend() -> Trend:
    return Trend(change="0.0", arrow=FLAT, is_improving=None)


def compute_trend(recent: Sequence[float], history: Sequence[float], lower_is_better: bool) -> Trend:
    """Compare the mean of *recent* values with the mean of *history*."""
    recent_avg = mean(recent)
    all_avg = mean(history)
    if recent_avg is None or not all_avg:
        return neutral_trend()

    change = f"{abs(recent_avg - all_avg) / all_avg * 100:.1f}"
    if float(change) == 0:
        return neutral_trend()

    arrow = UP if recent_avg > all_avg else DOWN
    improving = recent_avg < all_avg if lower_is_better else recent_avg > all_avg
    return Trend(change=change, arrow=arrow, is_improving=improving)


def _metric_trend(sessions: Sequence[TrainingSession], extract: Callable[[TrainingSession], Optional[float]],
                  lower_is_better: bool, window: int, ) -> Trend:
    if len(sessions) <= window:
        return neutral_trend()

    ordered = sort_sessions(sessions)
    history = [v for v in map(extract, ordered) if v is not None]
    recent = [v for v in map(extract, ordered[-window:]) if v is not None]
    return compute_trend(recent, history, lower_is_better)


def run_time_trend(sessions: Sequence[TrainingSession], window: int = DEFAULT_WINDOW) -> Trend:
    """Run-time trend; a faster recent average is improving."""
    return _metric_trend(sessions, lambda s: parse_run_time(s.run_time), lower_is_better=True, window=window)


def jump_balance_trend(sessions: Sequence[TrainingSession], window: int = DEFAULT_WINDOW) -> Trend:
    """Per-session jump-balance trend; a higher recent average is improving."""
    return _metric_trend(sessions, session_balance, lower_is_better=False, window=window)
