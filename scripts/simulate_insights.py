"""Simulate player insights, alerts and leaderboards from a sample testing history."""

import datetime
import logging

from athlete_tracker.core.config import settings
from athlete_tracker.core.logging import configure_logging
from athlete_tracker.engine import (
    build_leaderboards,
    calculate_insights,
    calculate_participation,
    calculate_session_quality,
    generate_alerts,
    get_chart_data,
    monthly_progress,
    summarize_participation,
    team_overview,
)
from athlete_tracker.schemas import MatrixSession, Player, TrainingSession

logger = logging.getLogger("simulate_insights")

TODAY = datetime.date(2025, 3, 1)

PLAYERS = [
    Player(id="p1", name="Alex Morgan"),
    Player(id="p2", name="Sam Rivera"),
    Player(id="p3", name="Jo Chen"),
]

# ─── Raw data as stored: (player, date, run time, jumps L/R/D single, L/R/D triple, sprints) ──
RAW_SESSIONS = [
    ("p1", "2024-09-02", "08:05", (205, 190, 230, 610, 590, 680), [11, 11, 10, 10, 9, 8]),
    ("p1", "2024-10-01", "07:58", (210, 195, 232, 615, 600, 690), [12, 11, 11, 10, 10, 9]),
    ("p1", "2024-11-04", "07:49", (212, 200, 238, 0, 0, 0), [12, 12, 11, 11, 10, 10]),
    ("p1", "2024-12-02", "", (215, 204, 240, 630, 610, 700), [0, 0, 12, 11, 11, 10]),
    ("p1", "2025-01-06", "07:41", (218, 210, 244, 640, 622, 715), [13, 12, 12, 12, 11, 11]),
    ("p1", "2025-02-03", "07:35", (220, 214, 246, 645, 630, 720), [13, 13, 12, 12, 12, 11]),
    ("p2", "2024-10-14", "07:10", (250, 248, 265, 0, 0, 0), [14, 14, 13, 13, 12, 12]),
    ("p2", "2024-11-18", "07:25", (252, 200, 262, 0, 0, 0), [14, 13, 12, 10, 9, 8]),
]

RAW_MATRIX = [
    ("p2", "2024-10-15", {"volleyFigure8": 62, "beepTest": 70, "slalom": 55}),
    ("p2", "2024-11-19", {"volleyFigure8": 74, "beepTest": 68, "slalom": 0}),
]


def _load_sessions() -> list[TrainingSession]:
    keys = ["leftSingle", "rightSingle", "doubleSingle", "leftTriple", "rightTriple", "doubleTriple"]
    return [
        TrainingSession.model_validate({
            "id": f"s{i}",
            "playerId": player_id,
            "date": date,
            "runTime": run_time,
            "broadJumps": dict(zip(keys, jumps)),
            "sprints": sprints,
        })
        for i, (player_id, date, run_time, jumps, sprints) in enumerate(RAW_SESSIONS, start=1)
    ]


def _load_matrix() -> list[MatrixSession]:
    return [MatrixSession.model_validate({"playerId": p, "date": d, "exercises": ex}) for p, d, ex in RAW_MATRIX]


def main():
    configure_logging()
    print(f"{settings.PROJECT_NAME} v{settings.VERSION} ({', '.join(settings.AUTHORS)})")
    sessions = _load_sessions()
    matrix = _load_matrix()
    logger.info("Loaded %d sessions and %d matrix sessions", len(sessions), len(matrix))

    for player in PLAYERS:
        player_sessions = [s for s in sessions if s.player_id == player.id]
        insights = calculate_insights(player_sessions, player.id)
        print()
        print("=" * 60)
        print(f"{player.name}: {insights.total_sessions} sessions")
        print("=" * 60)
        print(f"  Avg run time:   {insights.avg_run_time}  "
              f"({insights.run_time_trend.arrow} {insights.run_time_trend.change}%)")
        print(f"  Jump balance:   {insights.jump_balance}  "
              f"({insights.jump_balance_trend.arrow} {insights.jump_balance_trend.change}%)")
        print(f"  Fatigue:        {insights.fatigue_dropoff}")
        print(f"  Quality:        {insights.avg_quality_score}/100 ({insights.quality_rating})")
        if insights.fatigue_metrics:
            print(f"  Resistance:     {insights.fatigue_metrics.fatigue_resistance}, "
                  f"{insights.fatigue_metrics.recommendation}")
        for session in player_sessions:
            quality = calculate_session_quality(session)
            print(f"    {session.date}  quality {quality.score:>3} {quality.rating:<13} {quality.components}")
        charts = get_chart_data(player_sessions, player.id)
        print(f"  Chart points:   run {len(charts.run_times)}, sprint {len(charts.sprints)}, "
              f"single {len(charts.single_jumps)}, triple {len(charts.triple_jumps)}")
        for month in monthly_progress(player_sessions, "run_time"):
            print(f"    {month.label:<9} {month.formatted:>6} {month.arrow}")

    # ── Team ────────────────────────────────────────────────────────
    print()
    print("=" * 60)
    print("TEAM")
    print("=" * 60)
    overview = team_overview(PLAYERS, sessions, today=TODAY)
    print(f"Players: {overview.total_players}  sessions: {overview.total_sessions}  "
          f"avg quality: {overview.avg_quality}")

    records = calculate_participation(PLAYERS, sessions, today=TODAY)
    for record in records:
        print(f"  {record.player:<12} {record.status.value:<14} days since: {record.days_since}")
    print(f"  Summary: {summarize_participation(records).model_dump()}")

    print()
    for metric, board in build_leaderboards(PLAYERS, sessions).items():
        ranking = ", ".join(f"{e.player_name} {e.formatted}" for e in board)
        print(f"  {metric:<14} {ranking}")

    print()
    for alert in generate_alerts(PLAYERS, sessions, matrix):
        print(f"  [{alert.severity.value:<9}] {alert.player}: {alert.metric}: {alert.message}")


if __name__ == "__main__":
    main()
