"""
Test fixtures for team-di tests.

This module provides common fixtures for wiring repositories and services
and for writing temporary configuration files.
"""

import logging
from pathlib import Path
from unittest.mock import Mock

import pytest

from team_di.models import User
from team_di.protocols import UserRepositoryProtocol
from team_di.repositories import MockUserRepository, StubUserRepository
from team_di.utils import WrappingFormatter


@pytest.fixture(autouse=True)
def isolate_default_config(monkeypatch, tmp_path):
    """Point the default config path at a file that does not exist."""
    monkeypatch.setattr(
        "team_di.utils.config_manager.DEFAULT_CONFIG_PATH", str(tmp_path / "missing" / "config.toml")
    )


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers installed by setup_logging and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, WrappingFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def leader():
    """The leader used throughout the demonstration scenarios."""
    return User(id=1, name="orakaro", role="member")


@pytest.fixture
def stub_repository():
    """Live stub repository with default fixture values."""
    return StubUserRepository()


@pytest.fixture
def mock_repository():
    """Test repository that never finds a user."""
    return MockUserRepository()


@pytest.fixture
def fake_repository():
    """Repository double whose lookup result is set per test."""
    return Mock(spec=UserRepositoryProtocol)


@pytest.fixture
def write_config(tmp_path):
    """Write a TOML config file and return its path."""

    def _write(content: str) -> str:
        path = Path(tmp_path) / "config.toml"
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
