"""
Key-value store interface (Abstract Base Class).

Defines the minimal contract the repository layer needs from the
underlying cache: synchronous direct calls plus asynchronous calls that
return a future whose listeners fire exactly once on a store worker thread.
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import List, Optional, Tuple

from ..domain.entities import User


class KeyValueStore(ABC):
    """
    Abstract key-value store holding users keyed by id.

    Consistency of concurrent writes to the same key is owned by the
    implementation (last writer wins).

    Attributes:
        name: Name of the cache this store serves
    """

    name: str

    @abstractmethod
    def get(self, key: str) -> Optional[User]:
        """Return the value stored at key, or None."""

    @abstractmethod
    def put(self, key: str, value: User) -> Optional[User]:
        """Store value at key and return the prior value, or None."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove key if present. Removing a missing key is a no-op."""

    @abstractmethod
    def scan(self) -> List[Tuple[str, User]]:
        """Return a point-in-time snapshot of all (key, value) entries."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of entries."""

    @abstractmethod
    def get_async(self, key: str) -> "Future[Optional[User]]":
        """
        Asynchronously read key.

        Returns:
            Future resolving to the stored value or None
        """

    @abstractmethod
    def put_async(self, key: str, value: User) -> "Future[Optional[User]]":
        """
        Asynchronously store value at key.

        Returns:
            Future resolving to the prior value or None
        """

    def close(self) -> None:
        """Release worker threads and connections."""
