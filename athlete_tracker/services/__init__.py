"""Form-layer services that sit beside the insights engine."""

from athlete_tracker.services.validators import (
    build_matrix_session_from_form,
    build_session_from_form,
    validate_matrix_form,
    validate_session_form,
)

__all__ = [
    "build_matrix_session_from_form",
    "build_session_from_form",
    "validate_matrix_form",
    "validate_session_form",
]
