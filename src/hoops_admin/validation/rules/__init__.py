"""Validation rules by form type.

Each module contains validation functions for one concern:
- fields: single-field and cross-field rules shared by every form
- game: game create/edit form
- game_stat: per-team game statistics form
"""

from hoops_admin.validation.rules.fields import (
    validate_date,
    validate_non_negative,
    validate_rebounds,
    validate_required_id,
    validate_score,
    validate_shooting_stats,
    validate_team_selection,
)
from hoops_admin.validation.rules.game import validate_game_form
from hoops_admin.validation.rules.game_stat import validate_game_stat_form

__all__ = [
    # Field rules
    "validate_date",
    "validate_non_negative",
    "validate_required_id",
    "validate_score",
    # Cross-field rules
    "validate_team_selection",
    "validate_shooting_stats",
    "validate_rebounds",
    # Entity validators
    "validate_game_form",
    "validate_game_stat_form",
]
