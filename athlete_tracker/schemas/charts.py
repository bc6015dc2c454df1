"""
Chart projection schemas.

One point type per chart.  A session contributes a point to a chart only
when it recorded that metric.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import Field

from athlete_tracker.schemas.base import ResultModel


class RunTimePoint(ResultModel):
    date: datetime.date
    label: str
    seconds: int
    formatted: str


class SprintPoint(ResultModel):
    """First and last recorded sprint set of a session."""

    date: datetime.date
    label: str
    first_set: float
    last_set: float


class JumpPoint(ResultModel):
    """Left / right / double distances of one jump family (single or triple)."""

    date: datetime.date
    label: str
    left: Optional[float] = None
    right: Optional[float] = None
    double: Optional[float] = None


class ChartData(ResultModel):
    """Up to four independent, chronologically ordered series."""

    run_times: tuple[RunTimePoint, ...] = Field(default_factory=tuple)
    sprints: tuple[SprintPoint, ...] = Field(default_factory=tuple)
    single_jumps: tuple[JumpPoint, ...] = Field(default_factory=tuple)
    triple_jumps: tuple[JumpPoint, ...] = Field(default_factory=tuple)
