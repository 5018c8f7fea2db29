"""Version information for team-di."""

__version__ = "1.0.0"
