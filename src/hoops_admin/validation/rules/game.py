"""Game form validation.

Checks, in order:
- Date present, valid and not in the future
- Home and away teams selected
- Home and away teams differ (reported on away_team_id)
- Total scores >= 0
- Quarter scores >= 0
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from hoops_admin.exceptions import FormDataError
from hoops_admin.models import GameFormData
from hoops_admin.validation.clock import Clock, resolve_today
from hoops_admin.validation.constants import (
    FIELD_AWAY_TEAM_ID,
    FIELD_AWAY_TOTAL_SCORE,
    FIELD_DATE,
    FIELD_HOME_TEAM_ID,
    FIELD_HOME_TOTAL_SCORE,
    LABEL_AWAY_TEAM,
    LABEL_AWAY_TOTAL_SCORE,
    LABEL_HOME_TEAM,
    LABEL_HOME_TOTAL_SCORE,
    QUARTER_SCORE_FIELDS,
)
from hoops_admin.validation.results import ErrorCollector, ValidationResult
from hoops_admin.validation.rules.fields import (
    validate_date,
    validate_required_id,
    validate_score,
    validate_team_selection,
)

logger = logging.getLogger(__name__)


def as_game_form(data: GameFormData | Mapping[str, Any]) -> GameFormData:
    """Accept a GameFormData or a plain mapping.

    Raises:
        FormDataError: If data is neither
    """
    if isinstance(data, GameFormData):
        return data
    if isinstance(data, Mapping):
        return GameFormData.from_dict(data)
    raise FormDataError(
        f"Expected GameFormData or mapping, got {type(data).__name__}"
    )


def validate_game_form(
    data: GameFormData | Mapping[str, Any],
    *,
    today: date | None = None,
    clock: Clock | None = None,
) -> ValidationResult:
    """Validate a game form record.

    Args:
        data: Game form values
        today: Reference date for the future-date check
        clock: Clock read once when ``today`` is not given; defaults to the
            configured system clock

    Returns:
        ValidationResult keyed by GameFormData field names
    """
    game = as_game_form(data)
    reference = resolve_today(today, clock)
    errors = ErrorCollector()

    errors.add(FIELD_DATE, validate_date(game.date, reference))

    errors.add(
        FIELD_HOME_TEAM_ID, validate_required_id(game.home_team_id, LABEL_HOME_TEAM)
    )
    errors.add(
        FIELD_AWAY_TEAM_ID, validate_required_id(game.away_team_id, LABEL_AWAY_TEAM)
    )
    # Symmetric violation, always reported on the away team
    errors.add(
        FIELD_AWAY_TEAM_ID,
        validate_team_selection(game.home_team_id, game.away_team_id),
    )

    errors.add(
        FIELD_HOME_TOTAL_SCORE,
        validate_score(game.home_team_total_score, LABEL_HOME_TOTAL_SCORE),
    )
    errors.add(
        FIELD_AWAY_TOTAL_SCORE,
        validate_score(game.away_team_total_score, LABEL_AWAY_TOTAL_SCORE),
    )

    for field_name, label in QUARTER_SCORE_FIELDS:
        errors.add(field_name, validate_score(getattr(game, field_name), label))

    result = errors.result()
    logger.debug(
        f"Game form validated against {reference.isoformat()}: "
        f"{len(result.errors)} error(s)"
    )
    return result
