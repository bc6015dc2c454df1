"""
Entry-time validation for the session and matrix forms.

These bounds only apply when a coach types data in.  The insights engine
stays permissive and accepts any well-formed historical value, so nothing
here is called from :mod:`athlete_tracker.engine`.

Every validator returns a :class:`ValidationResult` and never raises.
Blank optional fields are valid (the measurement is simply not recorded).
"""

from __future__ import annotations

import datetime
import math
import re
from typing import Any, Mapping, Optional

from athlete_tracker.core.dates import parse_local_date
from athlete_tracker.engine.matrix import MATRIX_EXERCISES
from athlete_tracker.schemas.session import MatrixSession, TrainingSession
from athlete_tracker.schemas.validation import FormValidationResult, ValidationResult

# Minutes 0-59, seconds 00-59
_RUN_TIME_ENTRY_RE = re.compile(r"^([0-5]?\d):([0-5]\d)$")
_DATE_ENTRY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_PLAYER_NAME_RE = re.compile(r"^[^\W\d_]+(?:[ '.-]+[^\W\d_]+)*\.?$")

MIN_RUN_SECONDS = 4 * 60
MAX_RUN_SECONDS = 15 * 60
MIN_JUMP_CM = 50
MAX_JUMP_CM = 500
MAX_SPRINT_REPS = 60
MAX_DATE_AGE_YEARS = 5
PLAYER_NAME_LENGTH = (2, 50)

JUMP_FIELDS: dict[str, str] = {
    "leftSingle": "Left single jump",
    "rightSingle": "Right single jump",
    "doubleSingle": "Double single jump",
    "leftTriple": "Left triple jump",
    "rightTriple": "Right triple jump",
    "doubleTriple": "Double triple jump",
}
SPRINT_FIELDS = [f"sprint{i}" for i in range(1, 7)]

_OK = ValidationResult(valid=True)


def _invalid(message: str) -> ValidationResult:
    return ValidationResult(valid=False, error=message)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_number(value: Any) -> Optional[float]:
    """Parse a form value as a finite number, ``None`` if it is not one."""
    if isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


# ======================================================================
# Field validators
# ======================================================================


def validate_run_time_entry(value: Any) -> ValidationResult:
    """``MM:SS`` with minutes 0-59, between 4:00 and 15:00."""
    if _is_blank(value):
        return _OK
    match = _RUN_TIME_ENTRY_RE.match(str(value).strip())
    if not match:
        return _invalid("Run time must be in MM:SS format (e.g., 07:30)")
    total = int(match.group(1)) * 60 + int(match.group(2))
    if not MIN_RUN_SECONDS <= total <= MAX_RUN_SECONDS:
        return _invalid("Run time must be between 4:00 and 15:00")
    return _OK


def validate_broad_jump(value: Any, label: str = "Broad jump") -> ValidationResult:
    """Distance in cm between 50 and 500."""
    if _is_blank(value):
        return _OK
    number = _to_number(value)
    if number is None:
        return _invalid(f"{label} must be a number")
    if not MIN_JUMP_CM <= number <= MAX_JUMP_CM:
        return _invalid(f"{label} must be between {MIN_JUMP_CM} and {MAX_JUMP_CM} cm")
    return _OK


def validate_sprint_reps(value: Any, label: str = "Sprint reps") -> ValidationResult:
    """Reps between 0 and 60 with at most one decimal place."""
    if _is_blank(value):
        return _OK
    number = _to_number(value)
    if number is None:
        return _invalid(f"{label} must be a number")
    if not 0 <= number <= MAX_SPRINT_REPS:
        return _invalid(f"{label} must be between 0 and {MAX_SPRINT_REPS}")
    if round(number, 1) != number:
        return _invalid(f"{label} can have at most one decimal place")
    return _OK


def _years_before(day: datetime.date, years: int) -> datetime.date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # 29 February in a non-leap target year
        return day.replace(year=day.year - years, day=28)


def validate_session_date(value: Any, today: Optional[datetime.date] = None) -> ValidationResult:
    """A real ``YYYY-MM-DD`` date, not in the future, at most 5 years old."""
    if _is_blank(value):
        return _invalid("Date is required")
    if isinstance(value, datetime.datetime):
        value = value.date()
    text = value.isoformat() if isinstance(value, datetime.date) else str(value).strip()
    if not _DATE_ENTRY_RE.match(text):
        return _invalid("Date must be in YYYY-MM-DD format")
    try:
        day = parse_local_date(text)
    except ValueError:
        return _invalid("Date must be a valid calendar date")

    ref = today or datetime.date.today()
    if day > ref:
        return _invalid("Date cannot be in the future")
    if day < _years_before(ref, MAX_DATE_AGE_YEARS):
        return _invalid(f"Date cannot be more than {MAX_DATE_AGE_YEARS} years in the past")
    return _OK


def validate_player_name(name: Any) -> ValidationResult:
    """2-50 characters: letters, spaces, hyphens, apostrophes and periods."""
    if _is_blank(name):
        return _invalid("Player name is required")
    text = str(name).strip()
    shortest, longest = PLAYER_NAME_LENGTH
    if len(text) < shortest:
        return _invalid(f"Player name must be at least {shortest} characters")
    if len(text) > longest:
        return _invalid(f"Player name must be at most {longest} characters")
    if not _PLAYER_NAME_RE.match(text):
        return _invalid("Player name may only contain letters, spaces, hyphens, apostrophes and periods")
    return _OK


def validate_matrix_score(value: Any, label: str = "Score") -> ValidationResult:
    """Score between 0 and 100."""
    if _is_blank(value):
        return _OK
    number = _to_number(value)
    if number is None:
        return _invalid(f"{label} must be a number")
    if not 0 <= number <= 100:
        return _invalid(f"{label} must be between 0 and 100")
    return _OK


# ======================================================================
# Form validators
# ======================================================================


def _collect(*results: ValidationResult) -> FormValidationResult:
    errors = [r.error for r in results if not r.valid]
    return FormValidationResult(valid=not errors, errors=errors)


def validate_session_form(form: Mapping[str, Any], today: Optional[datetime.date] = None) -> FormValidationResult:
    """Validate every field of the training-session form.

    *form* holds the raw form values keyed ``date``, ``runTime``,
    ``leftSingle`` ... ``doubleTriple`` and ``sprint1`` ... ``sprint6``.
    """
    return _collect(validate_session_date(form.get("date"), today), validate_run_time_entry(form.get("runTime")),
                    *(validate_broad_jump(form.get(key), label) for key, label in JUMP_FIELDS.items()),
                    *(validate_sprint_reps(form.get(key), f"Sprint set {i}") for i, key in
                      enumerate(SPRINT_FIELDS, start=1)), )


def validate_matrix_form(form: Mapping[str, Any], today: Optional[datetime.date] = None) -> FormValidationResult:
    """Validate the matrix form: date, every exercise score, at least one score."""
    result = _collect(validate_session_date(form.get("date"), today),
                      *(validate_matrix_score(form.get(key), label) for key, label in MATRIX_EXERCISES.items()), )
    if all(_is_blank(form.get(key)) for key in MATRIX_EXERCISES):
        result.errors.append("Enter a score for at least one exercise")
        result.valid = False
    return result


# ======================================================================
# Form decoding
# ======================================================================


def build_session_from_form(form: Mapping[str, Any], player_id: str,
                            player_name: Optional[str] = None, ) -> TrainingSession:
    """Decode a validated session form; blank fields become "not recorded"."""
    return TrainingSession.model_validate({
        "playerId": player_id,
        "playerName": player_name,
        "date": form.get("date"),
        "runTime": form.get("runTime"),
        "broadJumps": {key: form.get(key) for key in JUMP_FIELDS},
        "sprints": [form.get(key) for key in SPRINT_FIELDS],
    })


def build_matrix_session_from_form(form: Mapping[str, Any], player_id: str,
                                   player_name: Optional[str] = None, ) -> MatrixSession:
    """Decode a validated matrix form; unscored exercises become ``None``."""
    return MatrixSession.model_validate({
        "playerId": player_id,
        "playerName": player_name,
        "date": form.get("date"),
        "exercises": {key: form.get(key) for key in MATRIX_EXERCISES},
    })
