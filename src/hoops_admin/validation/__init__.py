"""Validation for league admin forms.

This package provides validators for:
- Game forms: date, team selection, total and quarter scores
- Game stat forms: references, shooting and rebound consistency, counting
  stats, duplicate rows

Example usage:
    from datetime import date

    from hoops_admin.validation import (
        FormValidator,
        fixed_clock,
        validate_game_form,
    )

    result = validate_game_form(game_data, today=date(2024, 1, 15))

    validator = FormValidator(clock=fixed_clock(date(2024, 1, 15)))
    result = validator.validate_game_stat_form(stat_data, existing_stats)

    for field_name, message in result.errors.items():
        print(f"{field_name}: {message} ({result.kinds[field_name].value})")
"""

from hoops_admin.validation.clock import Clock, fixed_clock, system_clock
from hoops_admin.validation.form_validator import FormValidator
from hoops_admin.validation.results import (
    ErrorCollector,
    ErrorKind,
    FieldResult,
    ValidationResult,
)
from hoops_admin.validation.rules import (
    validate_date,
    validate_game_form,
    validate_game_stat_form,
    validate_non_negative,
    validate_rebounds,
    validate_required_id,
    validate_score,
    validate_shooting_stats,
    validate_team_selection,
)

__all__ = [
    "Clock",
    "ErrorCollector",
    "ErrorKind",
    "FieldResult",
    "FormValidator",
    "ValidationResult",
    "fixed_clock",
    "system_clock",
    "validate_date",
    "validate_game_form",
    "validate_game_stat_form",
    "validate_non_negative",
    "validate_rebounds",
    "validate_required_id",
    "validate_score",
    "validate_shooting_stats",
    "validate_team_selection",
]
