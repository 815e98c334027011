"""Validation report Pydantic schemas.

Serializable view of a ValidationResult, used by the CLI's --json output.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from hoops_admin.validation.results import ErrorKind, ValidationResult


class FieldError(BaseModel):
    """One field-level validation error."""

    field: str = Field(description="Record field name (e.g., 'away_team_id')")
    kind: ErrorKind = Field(description="Stable error tag")
    message: str = Field(description="Human-readable message")


class ValidationReport(BaseModel):
    """Validation outcome for a single form record."""

    form: Literal["game", "game_stat"] = Field(description="Form type validated")
    is_valid: bool = Field(description="True iff no field has an error")
    error_count: int = Field(ge=0, description="Number of fields with errors")
    errors: list[FieldError] = Field(
        default_factory=list, description="Errors in rule evaluation order"
    )

    @classmethod
    def from_result(
        cls, form: Literal["game", "game_stat"], result: ValidationResult
    ) -> ValidationReport:
        """Build a report from a ValidationResult.

        Args:
            form: Form type validated
            result: Engine result

        Returns:
            ValidationReport with errors in evaluation order
        """
        return cls(
            form=form,
            is_valid=result.is_valid,
            error_count=len(result.errors),
            errors=[
                FieldError(field=name, kind=result.kinds[name], message=message)
                for name, message in result.errors.items()
            ],
        )
