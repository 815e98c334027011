"""Validation constants.

Field names, display labels and message templates used by the form rules.
Field names match the record attributes exactly so consumers can route a
message to the right input by key.
"""

# Canonical date format accepted by the date rule
DATE_FORMAT = "YYYY-MM-DD"
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# Game form fields
FIELD_DATE = "date"
FIELD_HOME_TEAM_ID = "home_team_id"
FIELD_AWAY_TEAM_ID = "away_team_id"
FIELD_HOME_TOTAL_SCORE = "home_team_total_score"
FIELD_AWAY_TOTAL_SCORE = "away_team_total_score"

# Game stat form fields
FIELD_TEAM_ID = "team_id"
FIELD_GAME_ID = "game_id"
FIELD_POINTS = "points"
FIELD_FG_MADE = "field_goals_made"
FIELD_FG_ATTEMPTED = "field_goals_attempted"
FIELD_OFFENSIVE_REBOUNDS = "offensive_rebounds"
FIELD_DEFENSIVE_REBOUNDS = "defensive_rebounds"
FIELD_TOTAL_REBOUNDS = "total_rebounds"

# Quarter scores, in evaluation order: (field, label)
QUARTER_SCORE_FIELDS: tuple[tuple[str, str], ...] = (
    ("home_team_first_quarter_score", "home 1st quarter score"),
    ("away_team_first_quarter_score", "away 1st quarter score"),
    ("home_team_second_quarter_score", "home 2nd quarter score"),
    ("away_team_second_quarter_score", "away 2nd quarter score"),
    ("home_team_third_quarter_score", "home 3rd quarter score"),
    ("away_team_third_quarter_score", "away 3rd quarter score"),
    ("home_team_fourth_quarter_score", "home 4th quarter score"),
    ("away_team_fourth_quarter_score", "away 4th quarter score"),
)

# Shooting pairs after field goals, in evaluation order: (made, attempted, label)
EXTRA_SHOOTING_FIELDS: tuple[tuple[str, str, str], ...] = (
    (
        "three_point_field_goals_made",
        "three_point_field_goals_attempted",
        "three-point field goals",
    ),
    (
        "two_point_field_goals_made",
        "two_point_field_goals_attempted",
        "two-point field goals",
    ),
    ("free_throws_made", "free_throws_attempted", "free throws"),
)

# Counting stats checked only for non-negativity: (field, label)
COUNTING_STAT_FIELDS: tuple[tuple[str, str], ...] = (
    ("assists", "assists"),
    ("turnovers", "turnovers"),
    ("steals", "steals"),
    ("blocks", "blocks"),
    ("personal_fouls", "personal fouls"),
)

# Display labels
LABEL_HOME_TEAM = "home team"
LABEL_AWAY_TEAM = "away team"
LABEL_TEAM = "team"
LABEL_GAME = "game"
LABEL_HOME_TOTAL_SCORE = "home team total score"
LABEL_AWAY_TOTAL_SCORE = "away team total score"
LABEL_POINTS = "points"
LABEL_FIELD_GOALS = "field goals"
LABEL_OFFENSIVE_REBOUNDS = "offensive rebounds"
LABEL_DEFENSIVE_REBOUNDS = "defensive rebounds"
LABEL_TOTAL_REBOUNDS = "total rebounds"

# Messages
MSG_DATE_REQUIRED = "date is required"
MSG_DATE_INVALID = f"date must be a valid date in {DATE_FORMAT} format"
MSG_DATE_FUTURE = "date cannot be in the future"
MSG_REQUIRED = "{label} is required"
MSG_NEGATIVE = "{label} cannot be negative"
MSG_NOT_INTEGER = "{label} must be a whole number"
MSG_SAME_TEAM = "home and away teams must be different"
MSG_EXCEEDS_ATTEMPTS = "{label} made ({made}) cannot exceed {label} attempted ({attempted})"
MSG_REBOUND_SUM = (
    "total rebounds ({total}) must equal offensive + defensive ({expected})"
)
MSG_DUPLICATE_ENTRY = "statistics for this team and game already exist"
MSG_TEAM_NOT_IN_GAME = "the selected team did not play in the selected game"
