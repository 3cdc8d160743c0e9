"""
User repository interface (Abstract Base Class).

Defines the contract for user persistence and retrieval independent of
the underlying cache.
"""

from abc import ABC, abstractmethod

from ..core.results import SingleResult, SnapshotSequence
from ..domain.entities import User
from ..store.base import KeyValueStore
from .provider import RepositoryProvider


class UserRepository(ABC):
    """
    Abstract repository interface for user records.

    Every lookup and write returns an asynchronous result rather than a
    plain value so callers can await or compose it.
    """

    @abstractmethod
    async def init(self) -> None:
        """
        Clear all entries and seed the fixed set of users.

        Intended for startup and demo seeding only.
        """

    @abstractmethod
    def find_by_id(self, user_id: str) -> SingleResult[User]:
        """
        Find a user by id.

        Args:
            user_id: User identifier (cache key)

        Returns:
            Result resolving to the user, or EMPTY if no entry has that key
        """

    @abstractmethod
    def save(self, user: User) -> SingleResult[User]:
        """
        Insert or replace the entry at user.id (last writer wins).

        Args:
            user: User to store

        Returns:
            Result resolving to the same user
        """

    @abstractmethod
    def delete(self, user: User) -> SingleResult[None]:
        """
        Remove the entry at user.id.

        Idempotent: removing an absent user still completes successfully.
        """

    @abstractmethod
    def find_all(self) -> SnapshotSequence[User]:
        """
        Return all users present when iteration starts.

        No ordering is guaranteed.
        """


class UserRepositoryProvider(RepositoryProvider[UserRepository]):
    """Provides the cache-backed UserRepository."""

    def create(self, store: KeyValueStore) -> UserRepository:
        from .cache_repository import CacheUserRepository

        return CacheUserRepository(store)
