"""Session-list helpers (ordering, per-player filtering)."""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar, Union

from athlete_tracker.schemas.session import MatrixSession, TrainingSession

AnySession = TypeVar("AnySession", bound=Union[TrainingSession, MatrixSession])


def sort_sessions(sessions: Iterable[AnySession], newest_first: bool = False) -> list[AnySession]:
    """Return a new list ordered by calendar day (stable for same-day sessions)."""
    return sorted(sessions, key=lambda s: s.date, reverse=newest_first)


def sessions_for_player(sessions: Sequence[AnySession], player_id: str) -> list[AnySession]:
    return [s for s in sessions if s.player_id == player_id]
