"""
Session quality score.

A composite of up to five independently-gated components.  Each component
only counts when the session recorded the data it needs:

============ ================================ =================== ============
component    present when                     tiers (E/G/A/NW)    benchmark
============ ================================ =================== ============
run_time     valid run time                   30 / 25 / 20 / 15   run_time
jumps        any single jump recorded         30 / 25 / 20 / 15   broad_jump
sprint       any sprint set recorded          20 / 17 / 14 / 10   sprint
balance      both single-leg jumps recorded   10 / 8 / 6 / 4      jump_balance
fatigue      two or more sprint sets          10 / 8 / 6 / 4      fatigue_dropoff
============ ================================ =================== ============

The sum of present components is normalised by ``components_present × 20``
regardless of each component's own scale:

    score = round(sum / (components_present × 20) × 100)

so run-time and jump components weigh more than the others and the score
is **not** capped at 100 (an elite run-time-only session scores 150).
Historical scores stay comparable only if this is kept as-is.
"""

from __future__ import annotations

from typing import Sequence

from athlete_tracker.engine.balance import session_balance
from athlete_tracker.engine.benchmarks import tier_points
from athlete_tracker.engine.fatigue import sprint_dropoff
from athlete_tracker.engine.run_time import parse_run_time
from athlete_tracker.engine.stats import mean, round_half_up
from athlete_tracker.schemas.insights import NOT_AVAILABLE, QualityScore
from athlete_tracker.schemas.session import TrainingSession

POINTS_PER_COMPONENT = 20

RUN_TIME_POINTS = (30, 25, 20, 15)
JUMP_POINTS = (30, 25, 20, 15)
SPRINT_POINTS = (20, 17, 14, 10)
BALANCE_POINTS = (10, 8, 6, 4)
FATIGUE_POINTS = (10, 8, 6, 4)

_RATINGS: list[tuple[int, str]] = [(85, "Excellent"), (70, "Good"), (55, "Average"), ]
_LOWEST_RATING = "Below Average"


def rate_quality(score: float) -> str:
    """Map a quality score to its rating label."""
    for threshold, rating in _RATINGS:
        if score >= threshold:
            return rating
    return _LOWEST_RATING


def _components(session: TrainingSession) -> dict[str, int]:
    components: dict[str, int] = {}

    seconds = parse_run_time(session.run_time)
    if seconds is not None:
        components["run_time"] = tier_points(seconds, "run_time", RUN_TIME_POINTS)

    jumps = session.broad_jumps
    singles = [j for j in (jumps.left_single, jumps.right_single, jumps.double_single) if j]
    if singles:
        components["jumps"] = tier_points(mean(singles), "broad_jump", JUMP_POINTS)

    sprints = session.recorded_sprints
    if sprints:
        components["sprint"] = tier_points(mean(sprints), "sprint", SPRINT_POINTS)

    balance = session_balance(session)
    if balance is not None:
        components["balance"] = tier_points(balance, "jump_balance", BALANCE_POINTS)

    dropoff = sprint_dropoff(sprints)
    if dropoff is not None:
        components["fatigue"] = tier_points(dropoff, "fatigue_dropoff", FATIGUE_POINTS)

    return components


def calculate_session_quality(session: TrainingSession) -> QualityScore:
    """Score one session.  A session with no scorable data scores 0."""
    components = _components(session)
    if not components:
        return QualityScore(score=0, rating=rate_quality(0), components_present=0, components={})

    total = sum(components.values())
    score = int(round_half_up(total / (len(components) * POINTS_PER_COMPONENT) * 100))
    return QualityScore(score=score, rating=rate_quality(score), components_present=len(components),
                        components=components, )


def average_quality(sessions: Sequence[TrainingSession]) -> tuple[int, str]:
    """Rounded average score over *sessions* and its rating (``0, N/A`` if empty)."""
    if not sessions:
        return 0, NOT_AVAILABLE
    avg = int(round_half_up(mean(calculate_session_quality(s).score for s in sessions)))
    return avg, rate_quality(avg)
