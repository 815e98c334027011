"""hoops_admin CLI module.

Provides command-line tools for validating form records stored as JSON.

Usage:
    python -m hoops_admin.cli validate-game game.json
    python -m hoops_admin.cli validate-game-stat stat.json --existing stats.json
"""
