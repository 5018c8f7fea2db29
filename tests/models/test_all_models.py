"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from team_di.models import Settings, TeamDiBaseModel, User


class TestUser:
    """Test User model."""

    def test_user_creation(self):
        """Test creating a user."""
        user = User(id=1, name="orakaro", role="member")
        assert user.id == 1
        assert user.name == "orakaro"
        assert user.role == "member"

    def test_user_role_optional(self):
        """Test that role defaults to None."""
        assert User(id=1, name="orakaro").role is None

    def test_user_is_base_model(self):
        """Test that User uses the shared base configuration."""
        assert issubclass(User, TeamDiBaseModel)

    def test_user_role_mutable(self):
        """Test that role can be reassigned."""
        user = User(id=1, name="orakaro", role="member")
        user.role = "leader"
        assert user.role == "leader"

    def test_user_role_assignment_validated(self):
        """Test that role assignment is validated."""
        user = User(id=1, name="orakaro")
        with pytest.raises(ValidationError):
            user.role = ["leader"]

    @pytest.mark.parametrize("field, value", [("id", 2), ("name", "someone")])
    def test_user_identity_frozen(self, field, value):
        """Test that id and name cannot be reassigned."""
        user = User(id=1, name="orakaro", role="member")
        with pytest.raises(ValidationError):
            setattr(user, field, value)
        assert user.id == 1
        assert user.name == "orakaro"

    def test_user_extra_fields_forbidden(self):
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            User(id=1, name="orakaro", email="x@example.com")

    def test_user_missing_name(self):
        """Test that name is required."""
        with pytest.raises(ValidationError):
            User(id=1)

    def test_user_equality(self):
        """Test that users with equal fields compare equal."""
        assert User(id=1, name="a", role=None) == User(id=1, name="a")
        assert User(id=1, name="a", role="member") != User(id=1, name="a", role="leader")

    def test_user_repr(self):
        """Test the printed form of a user."""
        assert repr(User(id=1, name="orakaro", role="leader")) == "User(id=1, name='orakaro', role='leader')"


class TestSettings:
    """Test Settings model."""

    def test_defaults(self):
        """Test default settings values."""
        settings = Settings()
        assert settings.stub_name == "orakaro"
        assert settings.stub_role == "member"
        assert settings.verbosity == 0

    def test_negative_verbosity_rejected(self):
        """Test that verbosity cannot be negative."""
        with pytest.raises(ValidationError):
            Settings(verbosity=-1)

    def test_verbosity_assignment_validated(self):
        """Test that verbosity assignment is validated."""
        settings = Settings()
        with pytest.raises(ValidationError):
            settings.verbosity = -1
