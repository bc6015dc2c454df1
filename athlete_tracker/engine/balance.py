"""
Left/right jump balance.

Balance is ``min(left, right) / max(left, right) × 100`` over the single-leg
jump pair, and only exists when both legs were recorded.

The aggregate used in the insights summary is the ratio of the *average*
left and the *average* right distance, not the average of per-session
ratios.
"""

from __future__ import annotations

from typing import Optional, Sequence

from athlete_tracker.engine.stats import mean, percent
from athlete_tracker.schemas.session import TrainingSession


def balance_ratio(left: Optional[float], right: Optional[float]) -> Optional[float]:
    """Balance percentage of two distances, ``None`` unless both are positive."""
    if not left or not right:
        return None
    return percent(min(left, right), max(left, right))


def session_balance(session: TrainingSession) -> Optional[float]:
    jumps = session.broad_jumps
    return balance_ratio(jumps.left_single, jumps.right_single)


def aggregate_balance(sessions: Sequence[TrainingSession]) -> Optional[float]:
    """Balance of the average left and average right single jump.

    Only sessions that recorded both legs qualify; a one-sided session
    contributes nothing.
    """
    pairs = [(s.broad_jumps.left_single, s.broad_jumps.right_single) for s in sessions if
             session_balance(s) is not None]
    if not pairs:
        return None
    return balance_ratio(mean(left for left, _ in pairs), mean(right for _, right in pairs))
