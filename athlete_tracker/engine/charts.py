"""
Chart-data projection.

Takes the most recent sessions (chronological tail) and projects each into
the chart series for which it recorded data.  The series are independent:
a session without sprints still contributes its run-time point.  Results
are tuples, so they can be iterated any number of times.
"""

from __future__ import annotations

from typing import Optional, Sequence

from athlete_tracker.core.dates import format_date
from athlete_tracker.engine.insights import DEFAULT_CONFIG, InsightsConfig
from athlete_tracker.engine.run_time import format_run_time, parse_run_time
from athlete_tracker.engine.sessions import sort_sessions
from athlete_tracker.schemas.charts import ChartData, JumpPoint, RunTimePoint, SprintPoint
from athlete_tracker.schemas.session import TrainingSession


def _run_time_point(session: TrainingSession) -> Optional[RunTimePoint]:
    seconds = parse_run_time(session.run_time)
    if seconds is None:
        return None
    return RunTimePoint(date=session.date, label=format_date(session.date), seconds=seconds,
                        formatted=format_run_time(seconds), )


def _sprint_point(session: TrainingSession) -> Optional[SprintPoint]:
    sprints = session.recorded_sprints
    if not sprints:
        return None
    return SprintPoint(date=session.date, label=format_date(session.date), first_set=sprints[0],
                       last_set=sprints[-1], )


def _jump_point(session: TrainingSession, family: str) -> Optional[JumpPoint]:
    jumps = session.broad_jumps
    left, right, double = (jumps.get(f"{side}_{family}") for side in ("left", "right", "double"))
    if left is None and right is None and double is None:
        return None
    return JumpPoint(date=session.date, label=format_date(session.date), left=left, right=right, double=double)


def get_chart_data(sessions: Sequence[TrainingSession], player_id: Optional[str] = None,
                   config: Optional[InsightsConfig] = None, ) -> ChartData:
    """Project the last ``chart_window`` sessions into chart series.

    *player_id* is accepted for symmetry with :func:`calculate_insights`;
    the sessions are expected to be one player's already.
    """
    cfg = config or DEFAULT_CONFIG
    tail = sort_sessions(sessions)[-cfg.chart_window:]

    def series(project):
        return tuple(point for point in map(project, tail) if point is not None)

    return ChartData(run_times=series(_run_time_point), sprints=series(_sprint_point),
                     single_jumps=series(lambda s: _jump_point(s, "single")),
                     triple_jumps=series(lambda s: _jump_point(s, "triple")), )
