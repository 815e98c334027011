"""Shared pytest fixtures for hoops_admin tests.

Fixtures are organized into categories:
- Clock fixtures (fixed reference date)
- Sample form data fixtures (games, game stats)
- Temporary JSON file fixtures

Usage:
    # In any test file, fixtures are automatically available:
    def test_example(valid_game_data, today):
        result = validate_game_form(valid_game_data, today=today)
        assert result.is_valid
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from hoops_admin.config import get_settings

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.python import Function


# =============================================================================
# Test Collection Hook
# =============================================================================


def pytest_collection_modifyitems(config: Config, items: list[Function]) -> None:
    """Ensure unit tests run before integration tests."""

    def sort_key(item: Function) -> tuple[int, str]:
        path_str = str(item.fspath)
        if "/integration/" in path_str:
            return (1, path_str)
        return (0, path_str)

    items.sort(key=sort_key)


# =============================================================================
# Settings / Clock Fixtures
# =============================================================================


@pytest.fixture
def fresh_settings() -> Iterator[None]:
    """Reload settings from the environment before and after the test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def today() -> date:
    """Fixed reference date used instead of the wall clock."""
    return date(2024, 6, 1)


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def valid_game_data() -> dict[str, Any]:
    """Complete, consistent game form values."""
    return {
        "date": "2024-01-15",
        "home_team_id": 1,
        "away_team_id": 2,
        "home_team_total_score": 85,
        "away_team_total_score": 78,
    }


@pytest.fixture
def valid_stat_data() -> dict[str, Any]:
    """Complete, consistent game stat form values."""
    return {
        "team_id": 1,
        "game_id": 10,
        "points": 85,
        "field_goals_made": 35,
        "field_goals_attempted": 70,
        "three_point_field_goals_made": 8,
        "three_point_field_goals_attempted": 25,
        "two_point_field_goals_made": 27,
        "two_point_field_goals_attempted": 45,
        "free_throws_made": 7,
        "free_throws_attempted": 10,
        "offensive_rebounds": 10,
        "defensive_rebounds": 30,
        "total_rebounds": 40,
        "assists": 18,
        "turnovers": 12,
        "steals": 6,
        "blocks": 3,
        "personal_fouls": 19,
    }


@pytest.fixture
def sample_games() -> list[dict[str, Any]]:
    """Stored games as returned by the games API."""
    return [
        {"id": 10, "home_team_id": 1, "away_team_id": 2, "date": "2024-01-15"},
        {"id": 11, "home_team_id": 3, "away_team_id": 4, "date": "2024-01-16"},
    ]


# =============================================================================
# Temporary File Fixtures
# =============================================================================


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Factory fixture writing a JSON document into tmp_path.

    Usage:
        def test_example(write_json):
            path = write_json("game.json", {"date": "2024-01-15"})
    """

    def _write(filename: str, data: Any) -> Path:
        filepath = tmp_path / filename
        filepath.write_text(json.dumps(data))
        return filepath

    return _write
