"""
Calendar-date helpers.

Session dates are calendar days with no time of day.  They are stored as
``YYYY-MM-DD`` strings and must never be shifted by a timezone conversion:
a session recorded on the 5th stays on the 5th wherever it is read.  Every
helper here therefore builds :class:`datetime.date` values from the
year/month/day components directly and never goes through an
offset-aware parser.
"""

from __future__ import annotations

import datetime
import re
from typing import Optional, Union

DateLike = Union[str, datetime.date]

_DATE_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})(?:$|[T\s])")

# Labels are always English, whatever the process locale
MONTHS = ("January", "February", "March", "April", "May", "June", "July", "August", "September", "October",
          "November", "December", )
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def get_local_date_string(today: Optional[datetime.date] = None) -> str:
    """Return today's local calendar date as ``YYYY-MM-DD``."""
    return (today or datetime.date.today()).isoformat()


def parse_local_date(value: DateLike) -> datetime.date:
    """Parse a ``YYYY-MM-DD`` value into a calendar date.

    Any time or offset suffix (``T00:00:00Z``) is ignored so the calendar
    day written by the caller is the one returned.  ``date`` and
    ``datetime`` values are accepted as-is (a ``datetime`` is truncated).

    Raises :class:`ValueError` if the string is not a valid date, including
    a day followed by anything other than a ``T`` or whitespace time part
    (``2024-01-011``).
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value

    match = _DATE_RE.match(str(value))
    if not match:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")
    year, month, day = (int(part) for part in match.groups())
    return datetime.date(year, month, day)


def compare_dates(a: DateLike, b: DateLike) -> int:
    """Compare two dates by calendar day (negative, zero or positive)."""
    da, db = parse_local_date(a), parse_local_date(b)
    return (da > db) - (da < db)


def days_between(earlier: DateLike, later: DateLike) -> int:
    """Whole calendar days from *earlier* to *later*."""
    return (parse_local_date(later) - parse_local_date(earlier)).days


def format_date(value: DateLike) -> str:
    """Short label, e.g. ``Jan 5``."""
    d = parse_local_date(value)
    return f"{MONTHS[d.month - 1][:3]} {d.day}"


def format_date_long(value: DateLike) -> str:
    """Full label, e.g. ``Friday, January 5, 2024``."""
    d = parse_local_date(value)
    return f"{WEEKDAYS[d.weekday()]}, {MONTHS[d.month - 1]} {d.day}, {d.year}"


def month_key(value: DateLike) -> str:
    """Sortable month bucket, e.g. ``2024-01``."""
    d = parse_local_date(value)
    return f"{d.year}-{d.month:02d}"


def format_month_label(value: DateLike) -> str:
    """Month label, e.g. ``Jan 2024``."""
    d = parse_local_date(value)
    return f"{MONTHS[d.month - 1][:3]} {d.year}"
