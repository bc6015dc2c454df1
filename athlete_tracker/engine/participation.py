"""
Participation tracking for the monthly testing cadence.

Status by days since a player's last session:

- ``active``:        within ``active_days`` (a month plus a 5-day buffer)
- ``needs-checkin``: within ``needs_checkin_days`` (two months plus buffer)
- ``inactive``:      anything older
- ``never``:         no session at all

The reference day is injectable so results do not depend on the clock.
"""

from __future__ import annotations

import datetime
import logging
from typing import Optional, Sequence

from pydantic import BaseModel, Field, model_validator

from athlete_tracker.core.config import settings
from athlete_tracker.core.dates import days_between
from athlete_tracker.engine.quality import calculate_session_quality
from athlete_tracker.engine.sessions import sessions_for_player, sort_sessions
from athlete_tracker.engine.stats import mean, round_half_up
from athlete_tracker.schemas.session import Player, TrainingSession
from athlete_tracker.schemas.team import ParticipationRecord, ParticipationStatus, ParticipationSummary, TeamOverview

logger = logging.getLogger(__name__)

_STATUS_ORDER: dict[ParticipationStatus, int] = {
    ParticipationStatus.NEVER: 0,
    ParticipationStatus.INACTIVE: 1,
    ParticipationStatus.NEEDS_CHECKIN: 2,
    ParticipationStatus.ACTIVE: 3,
}


class ParticipationConfig(BaseModel):
    """Day thresholds for participation status and activity windows."""

    active_days: int = Field(settings.ACTIVE_DAYS, ge=1)
    needs_checkin_days: int = Field(settings.NEEDS_CHECKIN_DAYS, ge=1)
    recent_activity_days: int = Field(settings.RECENT_ACTIVITY_DAYS, ge=1)
    team_recent_days: int = Field(settings.TEAM_RECENT_DAYS, ge=1)

    @model_validator(mode="after")
    def _ordered_thresholds(self) -> "ParticipationConfig":
        if self.needs_checkin_days < self.active_days:
            raise ValueError("needs_checkin_days must not be shorter than active_days")
        return self


DEFAULT_PARTICIPATION_CONFIG = ParticipationConfig()


def _status_for(days_since: int, cfg: ParticipationConfig) -> ParticipationStatus:
    if days_since <= cfg.active_days:
        return ParticipationStatus.ACTIVE
    if days_since <= cfg.needs_checkin_days:
        return ParticipationStatus.NEEDS_CHECKIN
    return ParticipationStatus.INACTIVE


def _player_record(player: Player, sessions: Sequence[TrainingSession], today: datetime.date,
                   cfg: ParticipationConfig, ) -> ParticipationRecord:
    history = sort_sessions(sessions_for_player(sessions, player.id), newest_first=True)
    if not history:
        return ParticipationRecord(player_id=player.id, player=player.name, status=ParticipationStatus.NEVER)

    last = history[0].date
    days_since = days_between(last, today)
    window_start = today - datetime.timedelta(days=cfg.recent_activity_days)
    return ParticipationRecord(player_id=player.id, player=player.name, status=_status_for(days_since, cfg),
                               last_session=last, days_since=days_since, session_count=len(history),
                               recent_count=sum(1 for s in history if s.date >= window_start), )


def calculate_participation(players: Sequence[Player], sessions: Sequence[TrainingSession],
                            today: Optional[datetime.date] = None,
                            config: Optional[ParticipationConfig] = None, ) -> list[ParticipationRecord]:
    """Participation record per player, most urgent first.

    Ordered never → inactive → needs-checkin → active; within a status the
    player with the most days since their last session comes first.
    """
    cfg = config or DEFAULT_PARTICIPATION_CONFIG
    ref = today or datetime.date.today()

    records = [_player_record(p, sessions, ref, cfg) for p in players]
    records.sort(key=lambda r: (_STATUS_ORDER[r.status], -(r.days_since or 0)))

    logger.debug("Participation for %d players as of %s", len(records), ref)
    return records


def summarize_participation(records: Sequence[ParticipationRecord]) -> ParticipationSummary:
    counts = {status: 0 for status in ParticipationStatus}
    for record in records:
        counts[record.status] += 1
    return ParticipationSummary(active=counts[ParticipationStatus.ACTIVE],
                                needs_checkin=counts[ParticipationStatus.NEEDS_CHECKIN],
                                inactive=counts[ParticipationStatus.INACTIVE],
                                never=counts[ParticipationStatus.NEVER], )


def team_overview(players: Sequence[Player], sessions: Sequence[TrainingSession],
                  today: Optional[datetime.date] = None,
                  config: Optional[ParticipationConfig] = None, ) -> TeamOverview:
    """Team-level counters and the average session quality of all sessions."""
    cfg = config or DEFAULT_PARTICIPATION_CONFIG
    ref = today or datetime.date.today()
    window_start = ref - datetime.timedelta(days=cfg.team_recent_days)

    avg_quality = mean(calculate_session_quality(s).score for s in sessions)
    return TeamOverview(total_players=len(players), active_players=len({s.player_id for s in sessions}),
                        total_sessions=len(sessions),
                        recent_sessions=sum(1 for s in sessions if s.date >= window_start),
                        avg_quality=int(round_half_up(avg_quality)) if avg_quality is not None else 0, )
