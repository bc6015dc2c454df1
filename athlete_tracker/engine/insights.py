"""
Insights orchestration.

Combines every metric family into the flat :class:`Insights` record the
player view renders.  The caller passes the sessions of one player (the
engine does not re-filter) in any order; they are sorted by calendar day
first.

Each metric degrades on its own: a missing run time, one-sided jumps or
absent sprints only turn that metric into ``N/A``/neutral, the rest of the
record is still computed.  The input is never mutated, so calling twice
with the same sessions yields identical results.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from athlete_tracker.core.config import settings
from athlete_tracker.engine.balance import aggregate_balance
from athlete_tracker.engine.benchmarks import classify_performance
from athlete_tracker.engine.fatigue import analyze_fatigue
from athlete_tracker.engine.personal_bests import get_personal_bests
from athlete_tracker.engine.quality import average_quality
from athlete_tracker.engine.run_time import format_run_time, parse_run_time
from athlete_tracker.engine.sessions import sort_sessions
from athlete_tracker.engine.stats import mean, round_half_up
from athlete_tracker.engine.trends import jump_balance_trend, run_time_trend
from athlete_tracker.schemas.insights import NOT_AVAILABLE, Insights
from athlete_tracker.schemas.session import TrainingSession

logger = logging.getLogger(__name__)


class InsightsConfig(BaseModel):
    """Windows used by the insights and chart computations."""

    recent_window: int = Field(settings.RECENT_WINDOW, ge=1, le=50,
                               description="Sessions in the recent window used for trends", )
    chart_window: int = Field(settings.CHART_WINDOW, ge=1, le=100,
                              description="Most recent sessions projected into charts", )


DEFAULT_CONFIG = InsightsConfig()


def _percent_label(value: Optional[float]) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{int(round_half_up(value))}%"


def calculate_insights(sessions: Sequence[TrainingSession], player_id: Optional[str] = None,
                       config: Optional[InsightsConfig] = None, ) -> Insights:
    """Compute the full insights record for one player.

    Args:
        sessions: The player's sessions, any order.
        player_id: Identifies the player in the result (not used to filter).
        config: Optional :class:`InsightsConfig` override.

    Returns:
        :class:`Insights`.  An empty history yields ``total_sessions=0``
        and ``N/A`` for every metric.
    """
    cfg = config or DEFAULT_CONFIG

    if not sessions:
        logger.debug("No sessions for player %s, returning empty insights", player_id)
        return Insights(player_id=player_id, total_sessions=0)

    ordered = sort_sessions(sessions)

    # --- Run time ---
    run_times = [t for t in (parse_run_time(s.run_time) for s in ordered) if t is not None]
    avg_run_time = mean(run_times)

    # --- Jumps ---
    balance = aggregate_balance(ordered)
    single_jumps = [j for s in ordered for j in (s.broad_jumps.left_single, s.broad_jumps.right_single,
                                                 s.broad_jumps.double_single) if j]

    # --- Fatigue ---
    fatigue = analyze_fatigue(ordered)
    avg_dropoff = mean(p.dropoff for p in fatigue.sessions)

    # --- Quality ---
    avg_quality, quality_rating = average_quality(ordered)

    logger.debug("Insights for player %s: %d sessions, %d run times, %d fatigue profiles", player_id, len(ordered),
                 len(run_times), fatigue.sessions_analyzed, )

    return Insights(player_id=player_id, total_sessions=len(ordered),
                    avg_run_time=format_run_time(avg_run_time) if avg_run_time is not None else NOT_AVAILABLE,
                    avg_run_time_seconds=avg_run_time, jump_balance=_percent_label(balance),
                    jump_balance_value=balance, fatigue_dropoff=_percent_label(avg_dropoff),
                    run_time_trend=run_time_trend(ordered, cfg.recent_window),
                    jump_balance_trend=jump_balance_trend(ordered, cfg.recent_window),
                    personal_bests=get_personal_bests(ordered),
                    run_time_benchmark=classify_performance(avg_run_time, "run_time"),
                    jump_benchmark=classify_performance(mean(single_jumps), "broad_jump"),
                    balance_benchmark=classify_performance(balance, "jump_balance"), fatigue_metrics=fatigue,
                    avg_quality_score=avg_quality, quality_rating=quality_rating, )
