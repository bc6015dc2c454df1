"""
Insights result schemas.

Everything here is derived data: recomputed from a player's session list on
every request and never persisted.  Missing metrics are rendered as
``"N/A"`` (display strings) or ``None`` (raw values) so the view layer can
show them directly.
"""

from __future__ import annotations

import datetime
from typing import Optional, Union

from pydantic import Field

from athlete_tracker.schemas.base import ResultModel

NOT_AVAILABLE = "N/A"


class Benchmark(ResultModel):
    """Benchmark tier of a value for one metric."""

    level: str = Field(..., description="Elite, Good, Average, Needs Work, Unknown or N/A")
    color: str = Field(..., description="Display colour of the tier (hex)")


class Trend(ResultModel):
    """Recent-window average compared with the all-time average.

    ``change`` is the absolute percentage deviation with one decimal.
    ``is_improving`` is ``None`` when there is no change (or not enough
    history), so "no change" is distinct from "got worse".
    """

    change: str = Field("0.0", description="Absolute % change, one decimal")
    arrow: str = Field("→", description="↑, ↓ or →")
    is_improving: Optional[bool] = None


class BestEntry(ResultModel):
    """A best-ever value and the date it was recorded."""

    value: float
    date: datetime.date


class RunTimeBest(ResultModel):
    """Fastest run: seconds, the time as recorded, and its date."""

    time: int = Field(..., description="Total seconds")
    time_str: str = Field(..., description="Run time as recorded (MM:SS)")
    date: datetime.date


class PersonalBests(ResultModel):
    """Best-ever value per metric (``None`` when never recorded)."""

    best_run_time: Optional[RunTimeBest] = None
    best_left_jump: Optional[BestEntry] = None
    best_right_jump: Optional[BestEntry] = None
    best_double_jump: Optional[BestEntry] = None
    best_left_triple: Optional[BestEntry] = None
    best_right_triple: Optional[BestEntry] = None
    best_double_triple: Optional[BestEntry] = None
    best_sprint: Optional[BestEntry] = None


class SessionFatigue(ResultModel):
    """Sprint fatigue profile of a single session (recorded sets only)."""

    date: datetime.date
    dropoff: float = Field(..., description="(last - first) / first × 100")
    consistency: float = Field(..., description="min / max × 100")
    peak_position: int = Field(..., ge=1, description="1-based set of the best rep count")


class FatigueMetrics(ResultModel):
    """Fatigue resistance across all sessions with at least two sprint sets."""

    avg_dropoff: float = Field(0.0, description="Average dropoff %, one decimal")
    avg_consistency: float = Field(0.0, description="Average consistency %, one decimal")
    peak_timing: Union[float, str] = Field(NOT_AVAILABLE, description="Average peak set, one decimal")
    fatigue_resistance: str = Field(NOT_AVAILABLE, description="Excellent, Good, Moderate, Low")
    classification: Benchmark
    recommendation: str
    sessions_analyzed: int = 0
    sessions: list[SessionFatigue] = Field(default_factory=list)


class QualityScore(ResultModel):
    """Composite session quality.

    ``score`` is the sum of the present components divided by
    ``components_present × 20``; it is not clamped and can exceed 100.
    """

    score: int
    rating: str
    components_present: int = 0
    components: dict[str, int] = Field(default_factory=dict)


class Insights(ResultModel):
    """Everything the player insights view renders, in one flat record."""

    player_id: Optional[str] = None
    total_sessions: int = 0

    avg_run_time: str = NOT_AVAILABLE
    avg_run_time_seconds: Optional[float] = None
    jump_balance: str = NOT_AVAILABLE
    jump_balance_value: Optional[float] = None
    fatigue_dropoff: str = NOT_AVAILABLE

    run_time_trend: Trend = Field(default_factory=Trend)
    jump_balance_trend: Trend = Field(default_factory=Trend)

    personal_bests: Optional[PersonalBests] = None

    run_time_benchmark: Optional[Benchmark] = None
    jump_benchmark: Optional[Benchmark] = None
    balance_benchmark: Optional[Benchmark] = None

    fatigue_metrics: Optional[FatigueMetrics] = None

    avg_quality_score: int = 0
    quality_rating: str = NOT_AVAILABLE
