"""
Convenience entry point for running mealscheduler directly.

Usage: python -m mealscheduler [command] [options]
"""

from mealscheduler.cli.app import app

if __name__ == "__main__":
    app()
