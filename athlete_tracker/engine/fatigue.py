"""
Sprint fatigue analysis.

Each session records six 30-second sprint sets, freshest first.  Only the
recorded (non-zero) sets are analysed, in set order, so a session that
skipped the first two sets measures from its first recorded set:

    dropoff     = (last - first) / first × 100
    consistency = min / max × 100
    peak        = 1-based position of the best set among recorded sets

A session needs at least two recorded sets.  The aggregate averages the
three figures over qualifying sessions and classifies the average dropoff
against the ``fatigue_dropoff`` benchmark.  With no qualifying session a
renderable sentinel is returned instead of ``None``.

The same first/last-recorded-set convention is used everywhere a dropoff
is computed (insights, quality score, alerts, charts).
"""

from __future__ import annotations

from typing import Optional, Sequence

from athlete_tracker.engine.benchmarks import AVERAGE, ELITE, GOOD, NEEDS_WORK, classify_performance
from athlete_tracker.engine.sessions import sort_sessions
from athlete_tracker.engine.stats import mean, percent, round_half_up
from athlete_tracker.schemas.insights import NOT_AVAILABLE, FatigueMetrics, SessionFatigue
from athlete_tracker.schemas.session import TrainingSession

MIN_SETS = 2

# Benchmark level -> resistance label
RESISTANCE_LABELS: dict[str, str] = {
    ELITE: "Excellent",
    GOOD: "Good",
    AVERAGE: "Moderate",
    NEEDS_WORK: "Low",
}

RECOMMENDATIONS: dict[str, str] = {
    "Excellent": "Outstanding fatigue resistance. Maintain current conditioning and keep "
                 "sprint volume steady.",
    "Good": "Solid fatigue resistance. Add one extra interval set per week to push the "
            "later sets closer to the first.",
    "Moderate": "Noticeable drop across sets. Prioritise repeated-sprint work with short "
                "recoveries to build anaerobic capacity.",
    "Low": "Significant fatigue across sets. Build an aerobic base first, then introduce "
           "structured interval training.",
    NOT_AVAILABLE: "Record at least two sprint sets in a session to analyse fatigue.",
}


def sprint_dropoff(sprints: Sequence[float]) -> Optional[float]:
    """Dropoff % from the first to the last recorded set (``None`` if < 2 sets)."""
    if len(sprints) < MIN_SETS:
        return None
    return percent(sprints[-1] - sprints[0], sprints[0])


def analyze_session_fatigue(session: TrainingSession) -> Optional[SessionFatigue]:
    """Fatigue profile of one session, ``None`` with fewer than two recorded sets."""
    sprints = session.recorded_sprints
    dropoff = sprint_dropoff(sprints)
    if dropoff is None:
        return None

    peak = max(sprints)
    return SessionFatigue(date=session.date, dropoff=dropoff, consistency=percent(min(sprints), peak),
                          peak_position=sprints.index(peak) + 1, )


def _no_fatigue_data() -> FatigueMetrics:
    return FatigueMetrics(avg_dropoff=0.0, avg_consistency=0.0, peak_timing=NOT_AVAILABLE,
                          fatigue_resistance=NOT_AVAILABLE,
                          classification=classify_performance(None, "fatigue_dropoff"),
                          recommendation=RECOMMENDATIONS[NOT_AVAILABLE], sessions_analyzed=0, )


def analyze_fatigue(sessions: Sequence[TrainingSession]) -> FatigueMetrics:
    """Aggregate fatigue resistance over all qualifying sessions.

    Returns:
        :class:`FatigueMetrics`; the sentinel (``N/A`` labels, zeroed
        averages) when no session has two recorded sprint sets.
    """
    profiles = [p for p in map(analyze_session_fatigue, sort_sessions(sessions)) if p is not None]
    if not profiles:
        return _no_fatigue_data()

    avg_dropoff = mean(p.dropoff for p in profiles)
    classification = classify_performance(avg_dropoff, "fatigue_dropoff")
    resistance = RESISTANCE_LABELS[classification.level]

    return FatigueMetrics(avg_dropoff=round_half_up(avg_dropoff, 1),
                          avg_consistency=round_half_up(mean(p.consistency for p in profiles), 1),
                          peak_timing=round_half_up(mean(p.peak_position for p in profiles), 1),
                          fatigue_resistance=resistance, classification=classification,
                          recommendation=RECOMMENDATIONS[resistance], sessions_analyzed=len(profiles),
                          sessions=profiles, )
