"""
Session record schemas.

These are the records the storage layer hands to the insights engine.
Stored documents use camelCase keys (``playerId``, ``runTime``,
``broadJumps``); the models accept either camelCase or snake_case and
serialise back to camelCase with ``model_dump(by_alias=True)``.

Normalisation happens here, at the decoding boundary, so the engine only
ever sees one convention for a missing measurement:

- ``0``, ``""`` and ``None`` all decode to ``None`` ("not recorded");
- ``runTime`` is stripped, blank becomes ``None``;
- ``date`` is read as a calendar day (no timezone shift);
- ``sprints`` is padded with ``None`` up to six sets.

Records are frozen: engine functions cannot mutate what they are given.
"""

from __future__ import annotations

import datetime
from typing import Any, Annotated, Optional

from pydantic import Field, NonNegativeFloat, field_validator

from athlete_tracker.core.dates import parse_local_date
from athlete_tracker.schemas.base import StorageModel

JUMP_TYPES = ["left_single", "right_single", "double_single", "left_triple", "right_triple", "double_triple", ]

SPRINT_SETS = 6

MatrixScore = Annotated[float, Field(ge=0.0, le=100.0)]


def _none_if_unrecorded(value: Any) -> Any:
    """Map the storage "missing" markers (``0``, blank, ``None``) to ``None``."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        if float(value) == 0:
            return None
    except (TypeError, ValueError):
        # Not numeric: field validation reports it.
        return value
    return value


class Player(StorageModel):
    """A player.  The engine only uses it as an identifier/name pair."""

    id: str
    name: str


class BroadJumps(StorageModel):
    """The six broad-jump distances of a session (cm, ``None`` = not recorded)."""

    left_single: Optional[NonNegativeFloat] = Field(None, description="Left leg single jump (cm)")
    right_single: Optional[NonNegativeFloat] = Field(None, description="Right leg single jump (cm)")
    double_single: Optional[NonNegativeFloat] = Field(None, description="Two-footed single jump (cm)")
    left_triple: Optional[NonNegativeFloat] = Field(None, description="Left leg triple jump (cm)")
    right_triple: Optional[NonNegativeFloat] = Field(None, description="Right leg triple jump (cm)")
    double_triple: Optional[NonNegativeFloat] = Field(None, description="Two-footed triple jump (cm)")

    @field_validator(*JUMP_TYPES, mode="before")
    @classmethod
    def _zero_is_missing(cls, value: Any) -> Any:
        return _none_if_unrecorded(value)

    def get(self, jump_type: str) -> Optional[float]:
        """Return the distance for *jump_type* (one of :data:`JUMP_TYPES`)."""
        return getattr(self, jump_type)


class TrainingSession(StorageModel):
    """A traditional testing session: 2km run, broad jumps, 6 × 30s sprints."""

    id: Optional[str] = Field(None, description="Storage identifier")
    player_id: str = Field(..., description="Owning player")
    player_name: Optional[str] = Field(None, description="Denormalised player name")
    date: datetime.date = Field(..., description="Calendar date of the session (YYYY-MM-DD)")
    run_time: Optional[str] = Field(None, description="Run time as MM:SS (None if not recorded)")
    broad_jumps: BroadJumps = Field(default_factory=BroadJumps)
    sprints: tuple[Optional[NonNegativeFloat], ...] = Field(
        default=(None,) * SPRINT_SETS,
        description="Reps for six successive 30s sprint sets, freshest first",
    )

    @field_validator("date", mode="before")
    @classmethod
    def _calendar_day(cls, value: Any) -> datetime.date:
        return parse_local_date(value)

    @field_validator("run_time", mode="before")
    @classmethod
    def _blank_run_time(cls, value: Any) -> Any:
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @field_validator("broad_jumps", mode="before")
    @classmethod
    def _missing_jumps(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("sprints", mode="before")
    @classmethod
    def _six_sets(cls, value: Any) -> tuple:
        if value is None:
            return (None,) * SPRINT_SETS
        values = [_none_if_unrecorded(v) for v in value]
        if len(values) > SPRINT_SETS:
            raise ValueError(f"Expected at most {SPRINT_SETS} sprint sets, got {len(values)}")
        return tuple(values + [None] * (SPRINT_SETS - len(values)))

    @property
    def recorded_sprints(self) -> list[float]:
        """Recorded sprint reps in set order (missing sets dropped)."""
        return [s for s in self.sprints if s is not None]


class MatrixSession(StorageModel):
    """A skill-matrix session: exercise key -> score in [0, 100]."""

    id: Optional[str] = None
    player_id: str
    player_name: Optional[str] = None
    date: datetime.date
    exercises: dict[str, Optional[MatrixScore]] = Field(default_factory=dict)

    @field_validator("date", mode="before")
    @classmethod
    def _calendar_day(cls, value: Any) -> datetime.date:
        return parse_local_date(value)

    @field_validator("exercises", mode="before")
    @classmethod
    def _zero_is_missing(cls, value: Any) -> Any:
        if value is None:
            return {}
        return {key: _none_if_unrecorded(score) for key, score in value.items()}

    @property
    def recorded_scores(self) -> dict[str, float]:
        """Exercises that were actually scored."""
        return {key: score for key, score in self.exercises.items() if score is not None}
