"""
Basic tests for team-di package.

This module contains basic tests to verify the package structure and imports.
"""

import team_di


def test_package_import():
    """Test that the package can be imported."""
    assert team_di is not None


def test_version():
    """Test that version is accessible."""
    assert team_di.__version__ == "1.0.0"


def test_version_module():
    """Test that _version module can be imported."""
    from team_di._version import __version__

    assert __version__ == team_di.__version__


def test_main_classes_import():
    """Test that main classes can be imported from the package root."""
    from team_di import (
        Application,
        MockUserRepository,
        StubUserRepository,
        TeamService,
        User,
        UserService,
    )

    for obj in (Application, MockUserRepository, StubUserRepository, TeamService, User, UserService):
        assert obj is not None


def test_cli_entry_points_import():
    """Test that the CLI entry points are exported."""
    from team_di import cli_group, cli_main

    assert callable(cli_main)
    assert cli_group.name == "cli"
