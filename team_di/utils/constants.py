"""
Central constants for the team-di package.

This module consolidates the fixture values and role names used throughout
the codebase to eliminate magic strings.
"""

# ============================================================================
# Roles
# ============================================================================

# Role given to a user by promotion
LEADER_ROLE = "leader"

# Role carried by users returned from the live stub repository
MEMBER_ROLE = "member"

# ============================================================================
# Live Repository Fixture
# ============================================================================

# Name carried by users returned from the live stub repository
STUB_USER_NAME = "orakaro"

# Leader passed to build_team by the demo run
DEMO_LEADER_ID = 1

# ============================================================================
# Configuration
# ============================================================================

# Default configuration file location
DEFAULT_CONFIG_PATH = "~/.config/team-di/config.toml"

# Configuration section holding the stub repository fixture
REPOSITORY_SECTION = "repository"

# Configuration section holding logging options
LOGGING_SECTION = "logging"

# ============================================================================
# Logging Constants
# ============================================================================

# Log format shared by every handler
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

__all__ = [
    "LEADER_ROLE",
    "MEMBER_ROLE",
    "STUB_USER_NAME",
    "DEMO_LEADER_ID",
    "DEFAULT_CONFIG_PATH",
    "REPOSITORY_SECTION",
    "LOGGING_SECTION",
    "LOG_FORMAT",
]
