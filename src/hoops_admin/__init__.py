"""Form validation engine for a basketball league admin front end.

Validates game and game statistics records before they are persisted:
required references, date range, non-negative counts, and consistency
between made/attempted shots and rebound components.
"""

__version__ = "0.1.0"
