"""
Repository layer - Data access abstractions.

This layer provides interfaces for data persistence and retrieval,
hiding implementation details from the business logic.
"""

from .cache_repository import CacheUserRepository
from .provider import RepositoryProvider
from .user_repository import UserRepository, UserRepositoryProvider

__all__ = [
    "CacheUserRepository",
    "RepositoryProvider",
    "UserRepository",
    "UserRepositoryProvider",
]
