"""Game statistics form validation.

Checks, in order:
- Team and game selected
- Team played in the selected game (when games are supplied)
- No existing stat row for the same team and game (when rows are supplied)
- Points >= 0
- Shooting pairs: made/attempted >= 0, then made <= attempted
- Rebounds: each component >= 0, then offensive + defensive = total
- Remaining counting stats >= 0
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from hoops_admin.exceptions import FormDataError
from hoops_admin.models import GameReference, GameStatFormData
from hoops_admin.validation.constants import (
    COUNTING_STAT_FIELDS,
    EXTRA_SHOOTING_FIELDS,
    FIELD_DEFENSIVE_REBOUNDS,
    FIELD_FG_ATTEMPTED,
    FIELD_FG_MADE,
    FIELD_GAME_ID,
    FIELD_OFFENSIVE_REBOUNDS,
    FIELD_POINTS,
    FIELD_TEAM_ID,
    FIELD_TOTAL_REBOUNDS,
    LABEL_DEFENSIVE_REBOUNDS,
    LABEL_FIELD_GOALS,
    LABEL_GAME,
    LABEL_OFFENSIVE_REBOUNDS,
    LABEL_POINTS,
    LABEL_TEAM,
    LABEL_TOTAL_REBOUNDS,
    MSG_DUPLICATE_ENTRY,
    MSG_TEAM_NOT_IN_GAME,
)
from hoops_admin.validation.results import (
    ErrorCollector,
    ErrorKind,
    FieldResult,
    ValidationResult,
)
from hoops_admin.validation.rules.fields import (
    check_made_vs_attempted,
    check_rebound_sum,
    is_selected,
    validate_non_negative,
    validate_required_id,
)

logger = logging.getLogger(__name__)


def as_game_stat_form(data: GameStatFormData | Mapping[str, Any]) -> GameStatFormData:
    """Accept a GameStatFormData or a plain mapping.

    Raises:
        FormDataError: If data is neither
    """
    if isinstance(data, GameStatFormData):
        return data
    if isinstance(data, Mapping):
        return GameStatFormData.from_dict(data)
    raise FormDataError(
        f"Expected GameStatFormData or mapping, got {type(data).__name__}"
    )


def _as_game_reference(game: GameReference | Mapping[str, Any]) -> GameReference:
    if isinstance(game, GameReference):
        return game
    return GameReference.from_dict(game)


def check_team_in_game(
    team_id: Any,
    game_id: Any,
    games: Iterable[GameReference | Mapping[str, Any]],
) -> FieldResult:
    """Check that the team played in the selected game.

    Passes when either id is unselected or the game is not in ``games``.
    """
    if not (is_selected(team_id) and is_selected(game_id)):
        return FieldResult.passed()

    for game in games:
        ref = _as_game_reference(game)
        if ref.id == game_id:
            if ref.has_team(team_id):
                return FieldResult.passed()
            return FieldResult.failed(ErrorKind.TEAM_NOT_IN_GAME, MSG_TEAM_NOT_IN_GAME)

    return FieldResult.passed()


def check_duplicate_entry(
    stat: GameStatFormData,
    existing_stats: Iterable[GameStatFormData | Mapping[str, Any]],
) -> FieldResult:
    """Check that no existing row has the same (team_id, game_id) pair.

    The caller is responsible for ``existing_stats`` being current and not
    containing the row under validation.
    """
    if not (is_selected(stat.team_id) and is_selected(stat.game_id)):
        return FieldResult.passed()

    for other in existing_stats:
        if as_game_stat_form(other).entry_key == stat.entry_key:
            return FieldResult.failed(ErrorKind.DUPLICATE_ENTRY, MSG_DUPLICATE_ENTRY)

    return FieldResult.passed()


def _add_shooting_pair(
    errors: ErrorCollector,
    stat: GameStatFormData,
    made_field: str,
    attempted_field: str,
    label: str,
) -> None:
    made = getattr(stat, made_field)
    attempted = getattr(stat, attempted_field)

    errors.add(made_field, validate_non_negative(made, f"{label} made"))
    errors.add(attempted_field, validate_non_negative(attempted, f"{label} attempted"))
    # The comparison is meaningless once either operand is invalid
    if not (errors.has_error(made_field) or errors.has_error(attempted_field)):
        errors.add(made_field, check_made_vs_attempted(made, attempted, label))


def validate_game_stat_form(
    data: GameStatFormData | Mapping[str, Any],
    existing_stats: Iterable[GameStatFormData | Mapping[str, Any]] = (),
    *,
    games: Iterable[GameReference | Mapping[str, Any]] = (),
) -> ValidationResult:
    """Validate a game statistics form record.

    Args:
        data: Game stat form values
        existing_stats: Rows already stored, for the duplicate-entry check.
            Skipped when empty.
        games: Known games, for the team participation check. Skipped when
            empty or when the selected game is not listed.

    Returns:
        ValidationResult keyed by GameStatFormData field names
    """
    stat = as_game_stat_form(data)
    errors = ErrorCollector()

    errors.add(FIELD_TEAM_ID, validate_required_id(stat.team_id, LABEL_TEAM))
    errors.add(FIELD_GAME_ID, validate_required_id(stat.game_id, LABEL_GAME))

    errors.add(FIELD_TEAM_ID, check_team_in_game(stat.team_id, stat.game_id, games))
    errors.add(FIELD_TEAM_ID, check_duplicate_entry(stat, existing_stats))

    errors.add(FIELD_POINTS, validate_non_negative(stat.points, LABEL_POINTS))

    _add_shooting_pair(errors, stat, FIELD_FG_MADE, FIELD_FG_ATTEMPTED, LABEL_FIELD_GOALS)
    for made_field, attempted_field, label in EXTRA_SHOOTING_FIELDS:
        _add_shooting_pair(errors, stat, made_field, attempted_field, label)

    rebound_fields = (
        (FIELD_OFFENSIVE_REBOUNDS, LABEL_OFFENSIVE_REBOUNDS),
        (FIELD_DEFENSIVE_REBOUNDS, LABEL_DEFENSIVE_REBOUNDS),
        (FIELD_TOTAL_REBOUNDS, LABEL_TOTAL_REBOUNDS),
    )
    for field_name, label in rebound_fields:
        errors.add(field_name, validate_non_negative(getattr(stat, field_name), label))
    if not any(errors.has_error(field_name) for field_name, _ in rebound_fields):
        errors.add(
            FIELD_TOTAL_REBOUNDS,
            check_rebound_sum(
                stat.offensive_rebounds, stat.defensive_rebounds, stat.total_rebounds
            ),
        )

    for field_name, label in COUNTING_STAT_FIELDS:
        errors.add(field_name, validate_non_negative(getattr(stat, field_name), label))

    result = errors.result()
    logger.debug(
        f"Game stat form for team={stat.team_id} game={stat.game_id}: "
        f"{len(result.errors)} error(s)"
    )
    return result
