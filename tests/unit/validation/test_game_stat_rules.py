"""Unit tests for game statistics form validation."""

from __future__ import annotations

from typing import Any

import pytest

from hoops_admin.models import GameReference, GameStatFormData
from hoops_admin.validation.results import ErrorKind
from hoops_admin.validation.rules.game_stat import (
    check_duplicate_entry,
    check_team_in_game,
    validate_game_stat_form,
)


def make_stat(team_id: int | None = 1, game_id: int | None = 10, **stats: Any) -> GameStatFormData:
    """Create a GameStatFormData for testing."""
    return GameStatFormData(team_id=team_id, game_id=game_id, **stats)


@pytest.mark.unit
class TestValidGameStatForm:
    """Tests for records that must pass."""

    def test_complete_stat_line_passes(self, valid_stat_data: dict[str, Any]) -> None:
        result = validate_game_stat_form(valid_stat_data)
        assert result.is_valid is True
        assert result.errors == {}

    def test_required_fields_only_passes(self) -> None:
        assert validate_game_stat_form(make_stat()).is_valid is True

    def test_partial_shooting_entry_passes(self) -> None:
        """Made without attempted is a draft, not an error."""
        assert validate_game_stat_form(make_stat(field_goals_made=40)).is_valid is True

    def test_partial_rebound_entry_passes(self) -> None:
        stat = make_stat(offensive_rebounds=10, total_rebounds=35)
        assert validate_game_stat_form(stat).is_valid is True


@pytest.mark.unit
class TestRequiredReferences:
    """Tests for team_id / game_id presence."""

    def test_missing_team_and_game(self) -> None:
        result = validate_game_stat_form(make_stat(team_id=0, game_id=None))
        assert result.kinds == {
            "team_id": ErrorKind.REQUIRED_MISSING,
            "game_id": ErrorKind.REQUIRED_MISSING,
        }
        assert result.errors["team_id"] == "team is required"
        assert result.errors["game_id"] == "game is required"

    def test_empty_mapping(self) -> None:
        result = validate_game_stat_form({})
        assert set(result.errors) == {"team_id", "game_id"}

    def test_blank_ids_are_missing(self) -> None:
        result = validate_game_stat_form({"team_id": "", "game_id": ""})
        assert result.is_valid is False
        assert result.kinds == {
            "team_id": ErrorKind.REQUIRED_MISSING,
            "game_id": ErrorKind.REQUIRED_MISSING,
        }

    def test_blank_ids_skip_duplicate_check(self) -> None:
        result = validate_game_stat_form(
            {"team_id": "", "game_id": ""},
            existing_stats=[{"team_id": "", "game_id": ""}],
        )
        assert result.kinds["team_id"] == ErrorKind.REQUIRED_MISSING


@pytest.mark.unit
class TestShootingConsistency:
    """Tests for made/attempted pairs."""

    def test_field_goals_made_exceeds_attempted(self) -> None:
        result = validate_game_stat_form(
            make_stat(field_goals_made=50, field_goals_attempted=40)
        )
        assert list(result.errors) == ["field_goals_made"]
        assert result.kinds["field_goals_made"] == ErrorKind.INCONSISTENT_SHOOTING

    def test_negative_made_skips_comparison(self) -> None:
        result = validate_game_stat_form(
            make_stat(field_goals_made=-1, field_goals_attempted=30)
        )
        assert result.kinds == {"field_goals_made": ErrorKind.NEGATIVE_VALUE}
        assert result.errors["field_goals_made"] == "field goals made cannot be negative"

    def test_negative_attempted_skips_comparison(self) -> None:
        result = validate_game_stat_form(
            make_stat(field_goals_made=5, field_goals_attempted=-1)
        )
        assert result.kinds == {"field_goals_attempted": ErrorKind.NEGATIVE_VALUE}

    @pytest.mark.parametrize(
        ("made_field", "attempted_field"),
        [
            ("three_point_field_goals_made", "three_point_field_goals_attempted"),
            ("two_point_field_goals_made", "two_point_field_goals_attempted"),
            ("free_throws_made", "free_throws_attempted"),
        ],
    )
    def test_other_shooting_pairs(self, made_field: str, attempted_field: str) -> None:
        result = validate_game_stat_form(make_stat(**{made_field: 9, attempted_field: 4}))
        assert result.kinds == {made_field: ErrorKind.INCONSISTENT_SHOOTING}


@pytest.mark.unit
class TestReboundConsistency:
    """Tests for rebound components and sum."""

    def test_sum_mismatch_keyed_on_total(self) -> None:
        result = validate_game_stat_form(
            make_stat(offensive_rebounds=10, defensive_rebounds=20, total_rebounds=35)
        )
        assert result.kinds == {"total_rebounds": ErrorKind.INCONSISTENT_REBOUNDS}
        assert "35" in result.errors["total_rebounds"]
        assert "30" in result.errors["total_rebounds"]

    def test_negative_component_skips_sum(self) -> None:
        result = validate_game_stat_form(
            make_stat(offensive_rebounds=-2, defensive_rebounds=20, total_rebounds=35)
        )
        assert result.kinds == {"offensive_rebounds": ErrorKind.NEGATIVE_VALUE}

    def test_negative_total(self) -> None:
        result = validate_game_stat_form(make_stat(total_rebounds=-1))
        assert result.kinds == {"total_rebounds": ErrorKind.NEGATIVE_VALUE}


@pytest.mark.unit
class TestCountingStats:
    """Tests for plain non-negative stats."""

    def test_negative_points(self) -> None:
        result = validate_game_stat_form(make_stat(points=-3))
        assert result.errors == {"points": "points cannot be negative"}

    @pytest.mark.parametrize(
        "field_name", ["assists", "turnovers", "steals", "blocks", "personal_fouls"]
    )
    def test_negative_counting_stat(self, field_name: str) -> None:
        result = validate_game_stat_form(make_stat(**{field_name: -1}))
        assert result.kinds == {field_name: ErrorKind.NEGATIVE_VALUE}

    def test_personal_fouls_label(self) -> None:
        result = validate_game_stat_form(make_stat(personal_fouls=-1))
        assert result.errors["personal_fouls"] == "personal fouls cannot be negative"


@pytest.mark.unit
class TestDuplicateEntry:
    """Tests for the existing-row comparison."""

    def test_duplicate_reported_on_team(self) -> None:
        existing = [make_stat(team_id=2, game_id=10), make_stat(team_id=1, game_id=10)]
        result = validate_game_stat_form(make_stat(), existing)
        assert result.kinds == {"team_id": ErrorKind.DUPLICATE_ENTRY}

    def test_same_team_other_game_is_not_duplicate(self) -> None:
        existing = [make_stat(team_id=1, game_id=11)]
        assert validate_game_stat_form(make_stat(), existing).is_valid is True

    def test_existing_rows_as_mappings(self) -> None:
        existing = [{"id": 99, "team_id": 1, "game_id": 10, "points": 70}]
        result = validate_game_stat_form(make_stat(), existing)
        assert "team_id" in result.errors

    def test_no_existing_rows_skips_check(self) -> None:
        assert validate_game_stat_form(make_stat(), []).is_valid is True

    def test_unselected_ids_are_not_compared(self) -> None:
        result = check_duplicate_entry(make_stat(team_id=0), [make_stat(team_id=0)])
        assert result.is_valid is True


@pytest.mark.unit
class TestTeamParticipation:
    """Tests for the team-played-in-game check."""

    def test_team_in_game_passes(self, sample_games: list[dict[str, Any]]) -> None:
        result = validate_game_stat_form(make_stat(team_id=2, game_id=10), games=sample_games)
        assert result.is_valid is True

    def test_team_not_in_game(self, sample_games: list[dict[str, Any]]) -> None:
        result = validate_game_stat_form(make_stat(team_id=3, game_id=10), games=sample_games)
        assert result.kinds == {"team_id": ErrorKind.TEAM_NOT_IN_GAME}

    def test_unknown_game_skips_check(self, sample_games: list[dict[str, Any]]) -> None:
        result = validate_game_stat_form(make_stat(team_id=3, game_id=99), games=sample_games)
        assert result.is_valid is True

    def test_game_references(self) -> None:
        games = [GameReference(id=5, home_team_id=7, away_team_id=8)]
        assert check_team_in_game(8, 5, games).is_valid is True
        assert check_team_in_game(9, 5, games).kind == ErrorKind.TEAM_NOT_IN_GAME

    def test_duplicate_wins_over_participation(self, sample_games: list[dict[str, Any]]) -> None:
        existing = [make_stat(team_id=3, game_id=10)]
        result = validate_game_stat_form(
            make_stat(team_id=3, game_id=10), existing, games=sample_games
        )
        assert result.kinds == {"team_id": ErrorKind.DUPLICATE_ENTRY}


@pytest.mark.unit
class TestGameStatScenarios:
    """End-to-end game stat scenarios."""

    def test_shooting_and_rebound_violations(self) -> None:
        data = {
            "team_id": 1,
            "game_id": 1,
            "field_goals_made": 40,
            "field_goals_attempted": 30,
            "offensive_rebounds": 10,
            "defensive_rebounds": 20,
            "total_rebounds": 35,
        }
        result = validate_game_stat_form(data)
        assert result.is_valid is False
        assert result.kinds == {
            "field_goals_made": ErrorKind.INCONSISTENT_SHOOTING,
            "total_rebounds": ErrorKind.INCONSISTENT_REBOUNDS,
        }
        assert "points" not in result.errors
