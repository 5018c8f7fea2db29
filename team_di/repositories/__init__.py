"""
Repository implementations satisfying UserRepositoryProtocol.
"""

from .user_repository import MockUserRepository, StubUserRepository

__all__ = ["StubUserRepository", "MockUserRepository"]
