"""Entry-time validation results."""

from typing import Optional

from pydantic import BaseModel, Field


class ValidationResult(BaseModel):
    """Outcome of validating one form field."""

    valid: bool
    error: Optional[str] = None


class FormValidationResult(BaseModel):
    """Outcome of validating a whole form (every failing field reported)."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
