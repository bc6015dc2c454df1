"""Insights engine: pure, synchronous computations over session records."""

from athlete_tracker.engine.alerts import generate_alerts, group_alerts
from athlete_tracker.engine.benchmarks import BENCHMARKS, classify_performance
from athlete_tracker.engine.charts import get_chart_data
from athlete_tracker.engine.fatigue import analyze_fatigue, analyze_session_fatigue
from athlete_tracker.engine.insights import DEFAULT_CONFIG, InsightsConfig, calculate_insights
from athlete_tracker.engine.leaderboard import build_leaderboards
from athlete_tracker.engine.matrix import MATRIX_EXERCISES, calculate_matrix_insights, matrix_session_average
from athlete_tracker.engine.participation import (
    ParticipationConfig,
    calculate_participation,
    summarize_participation,
    team_overview,
)
from athlete_tracker.engine.personal_bests import get_personal_bests
from athlete_tracker.engine.progress import monthly_progress
from athlete_tracker.engine.quality import calculate_session_quality, rate_quality
from athlete_tracker.engine.run_time import format_run_time, parse_run_time, validate_run_time
from athlete_tracker.engine.trends import jump_balance_trend, run_time_trend

__all__ = [
    "BENCHMARKS",
    "DEFAULT_CONFIG",
    "MATRIX_EXERCISES",
    "InsightsConfig",
    "ParticipationConfig",
    "analyze_fatigue",
    "analyze_session_fatigue",
    "build_leaderboards",
    "calculate_insights",
    "calculate_matrix_insights",
    "calculate_participation",
    "calculate_session_quality",
    "classify_performance",
    "format_run_time",
    "generate_alerts",
    "get_chart_data",
    "get_personal_bests",
    "group_alerts",
    "jump_balance_trend",
    "matrix_session_average",
    "monthly_progress",
    "parse_run_time",
    "rate_quality",
    "run_time_trend",
    "summarize_participation",
    "team_overview",
    "validate_run_time",
]
