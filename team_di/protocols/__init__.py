"""
Protocols defining the capability interfaces.

Each layer depends on the protocol of the layer below it, so concrete
implementations can be swapped at the composition root.
"""

from .repository_protocol import UserRepositoryProtocol
from .service_protocol import TeamServiceProtocol, UserServiceProtocol

__all__ = [
    "UserRepositoryProtocol",
    "UserServiceProtocol",
    "TeamServiceProtocol",
]
