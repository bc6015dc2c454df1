"""
Performance alerts.

Compares each player's latest session with the one before it (and with
their whole history for breakthroughs):

Training sessions
    - run-time regression: > 5% slower (attention), > 10% (urgent)
    - run-time breakthrough: the latest session's time beats every earlier one
    - jump imbalance: latest balance < 85% (attention), < 75% (urgent)
    - high fatigue: latest dropoff < -25% (attention), < -35% (urgent)
    - jump breakthrough: a jump of the latest session beats every earlier one

Matrix sessions
    - exercise regression: < -10% (attention), < -20% (urgent)
    - exercise breakthrough: new best for an exercise scored in both sessions
    - overall average: > +15% (positive), < -15% (attention)

Alerts are sorted urgent → attention → positive, newest first.
"""

from __future__ import annotations

import logging
from typing import Sequence

from athlete_tracker.engine.balance import session_balance
from athlete_tracker.engine.fatigue import sprint_dropoff
from athlete_tracker.engine.matrix import MATRIX_EXERCISES, matrix_session_average
from athlete_tracker.engine.run_time import format_run_time, parse_run_time
from athlete_tracker.engine.sessions import sessions_for_player, sort_sessions
from athlete_tracker.engine.stats import percent
from athlete_tracker.schemas.session import JUMP_TYPES, MatrixSession, Player, TrainingSession
from athlete_tracker.schemas.team import AlertSeverity, AlertType, PerformanceAlert

logger = logging.getLogger(__name__)

RUN_TIME_METRIC = "2km Run Time"

JUMP_LABELS: dict[str, str] = {
    "left_single": "Left Single Jump",
    "right_single": "Right Single Jump",
    "double_single": "Double Single Jump",
    "left_triple": "Left Triple Jump",
    "right_triple": "Right Triple Jump",
    "double_triple": "Double Triple Jump",
}

_SEVERITY_ORDER: dict[AlertSeverity, int] = {
    AlertSeverity.URGENT: 0,
    AlertSeverity.ATTENTION: 1,
    AlertSeverity.POSITIVE: 2,
}


def _alert(player: Player, kind: AlertType, severity: AlertSeverity, metric: str, message: str,
           session) -> PerformanceAlert:
    return PerformanceAlert(type=kind, severity=severity, player=player.name, player_id=player.id, metric=metric,
                            message=message, date=session.date, )


# ======================================================================
# Training sessions
# ======================================================================


def _session_alerts(player: Player, history: Sequence[TrainingSession]) -> list[PerformanceAlert]:
    alerts: list[PerformanceAlert] = []
    previous, latest = history[-2], history[-1]

    # Run-time regression
    latest_time, prev_time = parse_run_time(latest.run_time), parse_run_time(previous.run_time)
    if latest_time and prev_time:
        change = percent(latest_time - prev_time, prev_time)
        if change > 5:
            alerts.append(_alert(player, AlertType.REGRESSION,
                                 AlertSeverity.URGENT if change > 10 else AlertSeverity.ATTENTION, RUN_TIME_METRIC,
                                 f"Run time increased by {change:.1f}% "
                                 f"({format_run_time(prev_time)} → {format_run_time(latest_time)})", latest, ))

    # Run-time breakthrough, only when the latest session recorded a time
    times = [t for t in (parse_run_time(s.run_time) for s in history) if t is not None]
    if latest_time and len(times) >= 2 and times[-1] < min(times[:-1]):
        best_before = min(times[:-1])
        improvement = percent(best_before - times[-1], best_before)
        alerts.append(_alert(player, AlertType.BREAKTHROUGH, AlertSeverity.POSITIVE, RUN_TIME_METRIC,
                             f"New personal best! Improved by {improvement:.1f}% ({format_run_time(times[-1])})",
                             latest, ))

    # Jump imbalance
    balance = session_balance(latest)
    if balance is not None and balance < 85:
        left, right = latest.broad_jumps.left_single, latest.broad_jumps.right_single
        stronger, weaker = ("left", "right") if left > right else ("right", "left")
        alerts.append(_alert(player, AlertType.IMBALANCE,
                             AlertSeverity.URGENT if balance < 75 else AlertSeverity.ATTENTION, "Jump Balance",
                             f"{stronger.upper()} leg {abs(left - right):g}cm stronger than {weaker} "
                             f"({balance:.0f}% balance)", latest, ))

    # High fatigue
    dropoff = sprint_dropoff(latest.recorded_sprints)
    if dropoff is not None and dropoff < -25:
        alerts.append(_alert(player, AlertType.FATIGUE,
                             AlertSeverity.URGENT if dropoff < -35 else AlertSeverity.ATTENTION, "Sprint Fatigue",
                             f"High fatigue detected ({abs(dropoff):.0f}% drop from first to last set)", latest, ))

    # Jump breakthroughs, only for jumps the latest session recorded
    for jump_type in JUMP_TYPES:
        if latest.broad_jumps.get(jump_type) is None:
            continue
        jumps = [j for j in (s.broad_jumps.get(jump_type) for s in history) if j is not None]
        if len(jumps) >= 2 and jumps[-1] > max(jumps[:-1]):
            best_before = max(jumps[:-1])
            improvement = percent(jumps[-1] - best_before, best_before)
            alerts.append(_alert(player, AlertType.BREAKTHROUGH, AlertSeverity.POSITIVE, JUMP_LABELS[jump_type],
                                 f"New PB! {jumps[-1]:g}cm (+{improvement:.1f}%)", latest, ))

    return alerts


# ======================================================================
# Matrix sessions
# ======================================================================


def _matrix_alerts(player: Player, history: Sequence[MatrixSession]) -> list[PerformanceAlert]:
    alerts: list[PerformanceAlert] = []
    previous, latest = history[-2], history[-1]

    for exercise, label in MATRIX_EXERCISES.items():
        latest_score, prev_score = latest.exercises.get(exercise), previous.exercises.get(exercise)
        if latest_score is None or prev_score is None:
            continue
        metric = f"Matrix: {label}"

        change = percent(latest_score - prev_score, prev_score)
        if change < -10:
            alerts.append(_alert(player, AlertType.REGRESSION,
                                 AlertSeverity.URGENT if change < -20 else AlertSeverity.ATTENTION, metric,
                                 f"Score decreased by {abs(change):.1f}% ({prev_score:.1f} → {latest_score:.1f})",
                                 latest, ))

        scores = [sc for sc in (s.exercises.get(exercise) for s in history) if sc is not None]
        best_before = max(scores[:-1])
        if latest_score > best_before:
            improvement = percent(latest_score - best_before, best_before)
            alerts.append(_alert(player, AlertType.BREAKTHROUGH, AlertSeverity.POSITIVE, metric,
                                 f"New PB! {latest_score:.1f} (+{improvement:.1f}%)", latest, ))

    latest_avg, prev_avg = matrix_session_average(latest), matrix_session_average(previous)
    if latest_avg and prev_avg:
        avg_change = percent(latest_avg - prev_avg, prev_avg)
        if avg_change > 15:
            alerts.append(_alert(player, AlertType.BREAKTHROUGH, AlertSeverity.POSITIVE,
                                 "Matrix: Overall Performance",
                                 f"Strong improvement across all exercises! Average score up {avg_change:.1f}%",
                                 latest, ))
        elif avg_change < -15:
            alerts.append(_alert(player, AlertType.REGRESSION, AlertSeverity.ATTENTION,
                                 "Matrix: Overall Performance",
                                 f"Average score across exercises down {abs(avg_change):.1f}%", latest, ))

    return alerts


# ======================================================================
# Main entry point
# ======================================================================


def generate_alerts(players: Sequence[Player], sessions: Sequence[TrainingSession],
                    matrix_sessions: Sequence[MatrixSession] = (), ) -> list[PerformanceAlert]:
    """Alerts for every player with at least two sessions of a kind."""
    alerts: list[PerformanceAlert] = []
    for player in players:
        history = sort_sessions(sessions_for_player(sessions, player.id))
        if len(history) >= 2:
            alerts.extend(_session_alerts(player, history))

        matrix_history = sort_sessions(sessions_for_player(matrix_sessions, player.id))
        if len(matrix_history) >= 2:
            alerts.extend(_matrix_alerts(player, matrix_history))

    # Newest first, then a stable sort by severity keeps that order per group.
    alerts.sort(key=lambda a: a.date, reverse=True)
    alerts.sort(key=lambda a: _SEVERITY_ORDER[a.severity])

    logger.debug("Generated %d alerts for %d players", len(alerts), len(players))
    return alerts


def group_alerts(alerts: Sequence[PerformanceAlert]) -> dict[str, list[PerformanceAlert]]:
    """Split alerts by severity (keys ``urgent``, ``attention``, ``positive``)."""
    return {severity.value: [a for a in alerts if a.severity == severity] for severity in AlertSeverity}
