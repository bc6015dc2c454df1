"""
Skill-matrix sessions.

Matrix sessions score a fixed catalogue of racket-skill drills from 0 to
100.  Unscored drills are ``None`` and never count towards an average.
"""

from __future__ import annotations

from typing import Optional, Sequence

from athlete_tracker.engine.sessions import sort_sessions
from athlete_tracker.engine.stats import mean
from athlete_tracker.schemas.insights import BestEntry
from athlete_tracker.schemas.session import MatrixSession
from athlete_tracker.schemas.team import ExerciseSummary, MatrixInsights

# Exercise key -> display label (form and alert order)
MATRIX_EXERCISES: dict[str, str] = {
    "volleyFigure8": "Volley Figure 8",
    "bounceFigure8": "Bounce Figure 8",
    "volleySideToSide": "Volley Side to Side",
    "bounceSideToSide": "Bounce Side to Side",
    "dropTargetBackhand": "Drop Target BH",
    "dropTargetForehand": "Drop Target FH",
    "serviceBoxDriveForehand": "Service Box FH",
    "serviceBoxDriveBackhand": "Service Box BH",
    "cornerVolleys": "Corner Volleys",
    "beepTest": "Beep Test",
    "ballTransfer": "Ball Transfer",
    "slalom": "Slalom",
}


def exercise_label(exercise: str) -> str:
    return MATRIX_EXERCISES.get(exercise, exercise)


def matrix_session_average(session: MatrixSession) -> Optional[float]:
    """Average of the scored exercises of one session."""
    return mean(session.recorded_scores.values())


def _exercise_summary(exercise: str, ordered: Sequence[MatrixSession]) -> ExerciseSummary:
    best: Optional[BestEntry] = None
    scores: list[float] = []
    for session in ordered:
        score = session.exercises.get(exercise)
        if score is None:
            continue
        scores.append(score)
        if best is None or score > best.value:
            best = BestEntry(value=score, date=session.date)
    return ExerciseSummary(exercise=exercise, label=exercise_label(exercise), average=mean(scores),
                           sessions_recorded=len(scores), best=best, )


def calculate_matrix_insights(matrix_sessions: Sequence[MatrixSession]) -> MatrixInsights:
    """Per-exercise averages and bests for one player's matrix sessions.

    Catalogue exercises come first in catalogue order, followed by any
    other exercise key found in the sessions.
    """
    if not matrix_sessions:
        return MatrixInsights(total_sessions=0)

    ordered = sort_sessions(matrix_sessions)
    extra = sorted({key for s in ordered for key in s.exercises} - set(MATRIX_EXERCISES))
    return MatrixInsights(total_sessions=len(ordered), latest_average=matrix_session_average(ordered[-1]),
                          exercises=[_exercise_summary(key, ordered) for key in [*MATRIX_EXERCISES, *extra]], )
