"""Tests for protocol modules."""

import inspect
from typing import Protocol

from team_di.protocols import TeamServiceProtocol, UserRepositoryProtocol, UserServiceProtocol
from team_di.repositories import MockUserRepository, StubUserRepository
from team_di.services import TeamService, UserService


def test_protocols_are_protocols():
    """Test that every capability interface is a Protocol type."""
    for protocol in (UserRepositoryProtocol, UserServiceProtocol, TeamServiceProtocol):
        assert issubclass(protocol, Protocol)  # type: ignore[arg-type]


def test_protocol_signatures():
    """Test that the protocols define the expected methods and parameters."""
    assert "user_id" in inspect.signature(UserRepositoryProtocol.find_by_id).parameters
    assert "assignee_id" in inspect.signature(UserServiceProtocol.promote).parameters
    assert "leader" in inspect.signature(TeamServiceProtocol.build_team).parameters


def test_repositories_satisfy_protocol():
    """Test that both repositories satisfy the protocol without inheriting it."""
    assert isinstance(StubUserRepository(), UserRepositoryProtocol)
    assert isinstance(MockUserRepository(), UserRepositoryProtocol)
    assert UserRepositoryProtocol not in StubUserRepository.__mro__


def test_services_satisfy_protocols():
    """Test that the services satisfy their protocols structurally."""
    user_service = UserService(MockUserRepository())
    assert isinstance(user_service, UserServiceProtocol)
    assert isinstance(TeamService(user_service), TeamServiceProtocol)
    assert not isinstance(user_service, TeamServiceProtocol)
