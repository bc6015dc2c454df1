"""
Run-time parsing.

Run times are recorded as ``MM:SS`` strings.  The engine accepts any
well-formed time (historical data can be outside today's entry bounds);
the bounded 4-15 minute check only applies at data entry, see
:mod:`athlete_tracker.services.validators`.

A malformed or missing time is a data condition, not an error:
:func:`parse_run_time` returns ``None`` and never raises.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from athlete_tracker.schemas.insights import NOT_AVAILABLE

_RUN_TIME_RE = re.compile(r"^(\d+):(\d{1,2})$")


def validate_run_time(value: Optional[str]) -> bool:
    """``True`` iff *value* is ``MM:SS`` with ``MM >= 0`` and ``0 <= SS < 60``."""
    if not value or not isinstance(value, str):
        return False
    match = _RUN_TIME_RE.match(value.strip())
    return bool(match) and int(match.group(2)) < 60


def parse_run_time(value: Optional[str]) -> Optional[int]:
    """Total seconds of a ``MM:SS`` time, ``None`` if absent or invalid."""
    if not validate_run_time(value):
        return None
    minutes, seconds = value.strip().split(":")
    return int(minutes) * 60 + int(seconds)


def format_run_time(seconds: Optional[float]) -> str:
    """Format seconds as ``M:SS`` (``N/A`` for missing or non-positive)."""
    if not seconds or seconds <= 0:
        return NOT_AVAILABLE
    minutes = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{minutes}:{secs:02d}"
