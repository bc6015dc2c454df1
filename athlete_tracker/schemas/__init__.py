"""Pydantic schemas for session records and derived results."""

from athlete_tracker.schemas.session import (
    JUMP_TYPES,
    SPRINT_SETS,
    BroadJumps,
    MatrixSession,
    Player,
    TrainingSession,
)
from athlete_tracker.schemas.insights import (
    NOT_AVAILABLE,
    Benchmark,
    BestEntry,
    FatigueMetrics,
    Insights,
    PersonalBests,
    QualityScore,
    RunTimeBest,
    SessionFatigue,
    Trend,
)
from athlete_tracker.schemas.charts import ChartData, JumpPoint, RunTimePoint, SprintPoint
from athlete_tracker.schemas.team import (
    AlertSeverity,
    AlertType,
    ExerciseSummary,
    LeaderboardEntry,
    MatrixInsights,
    MonthlyMetric,
    ParticipationRecord,
    ParticipationStatus,
    ParticipationSummary,
    PerformanceAlert,
    TeamOverview,
)
from athlete_tracker.schemas.validation import FormValidationResult, ValidationResult

__all__ = [
    "JUMP_TYPES",
    "SPRINT_SETS",
    "BroadJumps",
    "MatrixSession",
    "Player",
    "TrainingSession",
    "NOT_AVAILABLE",
    "Benchmark",
    "BestEntry",
    "FatigueMetrics",
    "Insights",
    "PersonalBests",
    "QualityScore",
    "RunTimeBest",
    "SessionFatigue",
    "Trend",
    "ChartData",
    "JumpPoint",
    "RunTimePoint",
    "SprintPoint",
    "AlertSeverity",
    "AlertType",
    "ExerciseSummary",
    "LeaderboardEntry",
    "MatrixInsights",
    "MonthlyMetric",
    "ParticipationRecord",
    "ParticipationStatus",
    "ParticipationSummary",
    "PerformanceAlert",
    "TeamOverview",
    "FormValidationResult",
    "ValidationResult",
]
