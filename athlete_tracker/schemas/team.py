"""
Coach-side result schemas: leaderboards, participation, alerts, progress.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from athlete_tracker.schemas.base import ResultModel
from athlete_tracker.schemas.insights import BestEntry


# ======================================================================
# Enums
# ======================================================================

class ParticipationStatus(str, Enum):
    """Training regularity for the monthly testing cadence."""
    NEVER = "never"
    INACTIVE = "inactive"
    NEEDS_CHECKIN = "needs-checkin"
    ACTIVE = "active"


class AlertType(str, Enum):
    REGRESSION = "regression"
    BREAKTHROUGH = "breakthrough"
    IMBALANCE = "imbalance"
    FATIGUE = "fatigue"


class AlertSeverity(str, Enum):
    URGENT = "urgent"
    ATTENTION = "attention"
    POSITIVE = "positive"


# ======================================================================
# Leaderboards
# ======================================================================

class LeaderboardEntry(ResultModel):
    """One player's personal best on a leaderboard."""

    player_id: str
    player_name: str
    value: float
    formatted: str


# ======================================================================
# Participation
# ======================================================================

class ParticipationRecord(ResultModel):
    player_id: str
    player: str
    status: ParticipationStatus
    last_session: Optional[datetime.date] = None
    days_since: Optional[int] = None
    session_count: int = 0
    recent_count: int = Field(0, description="Sessions inside the recent-activity window")


class ParticipationSummary(ResultModel):
    active: int = 0
    needs_checkin: int = 0
    inactive: int = 0
    never: int = 0


class TeamOverview(ResultModel):
    total_players: int
    active_players: int = Field(..., description="Players with at least one session")
    total_sessions: int
    recent_sessions: int = Field(..., description="Sessions inside the team-recent window")
    avg_quality: int


# ======================================================================
# Alerts
# ======================================================================

class PerformanceAlert(ResultModel):
    type: AlertType
    severity: AlertSeverity
    player: str
    player_id: str
    metric: str
    message: str
    date: datetime.date


# ======================================================================
# Monthly progress
# ======================================================================

class MonthlyMetric(ResultModel):
    """Average of one metric over one calendar month."""

    month: str = Field(..., description="YYYY-MM")
    label: str = Field(..., description="e.g. Jan 2024")
    value: Optional[float] = None
    formatted: str
    session_count: int
    direction: Optional[str] = Field(None, description="'lower' or 'higher' is better")
    arrow: str = Field("—", description="Change vs previous month: ↑, ↓, → (— for the first month)")
    is_improving: Optional[bool] = None


# ======================================================================
# Matrix sessions
# ======================================================================

class ExerciseSummary(ResultModel):
    exercise: str
    label: str
    average: Optional[float] = None
    sessions_recorded: int = 0
    best: Optional[BestEntry] = None


class MatrixInsights(ResultModel):
    total_sessions: int = 0
    latest_average: Optional[float] = None
    exercises: list[ExerciseSummary] = Field(default_factory=list)
