"""Form validator facade.

Bundles the entity validators with an injected clock, so every record a
caller validates is checked against the same source of "today".
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from hoops_admin.models import GameFormData, GameReference, GameStatFormData
from hoops_admin.validation.clock import Clock, system_clock
from hoops_admin.validation.results import ValidationResult
from hoops_admin.validation.rules import validate_game_form, validate_game_stat_form


class FormValidator:
    """Validator for league admin forms.

    Holds no state besides its clock; every call is independent.

    Example:
        validator = FormValidator(clock=fixed_clock(date(2024, 1, 15)))
        result = validator.validate_game_form(game_data)

        if not result.is_valid:
            for field_name, message in result.errors.items():
                print(f"{field_name}: {message}")
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self.clock: Clock = clock or system_clock

    def validate_game_form(
        self, data: GameFormData | Mapping[str, Any]
    ) -> ValidationResult:
        """Validate a game form record.

        Checks:
        - Date present, valid YYYY-MM-DD and not after today
        - Both teams selected and different
        - Total and quarter scores are whole numbers >= 0

        Args:
            data: Game form values

        Returns:
            ValidationResult keyed by field name
        """
        return validate_game_form(data, clock=self.clock)

    def validate_game_stat_form(
        self,
        data: GameStatFormData | Mapping[str, Any],
        existing_stats: Iterable[GameStatFormData | Mapping[str, Any]] = (),
        games: Iterable[GameReference | Mapping[str, Any]] = (),
    ) -> ValidationResult:
        """Validate a game statistics form record.

        Checks:
        - Team and game selected
        - Team took part in the game, when games are supplied
        - No duplicate team/game row, when existing rows are supplied
        - Counting stats are whole numbers >= 0
        - Made <= attempted for every shooting pair
        - Offensive + defensive rebounds = total rebounds

        Args:
            data: Game stat form values
            existing_stats: Rows already stored
            games: Known games

        Returns:
            ValidationResult keyed by field name
        """
        return validate_game_stat_form(data, existing_stats, games=games)
