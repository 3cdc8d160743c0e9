"""
Lazy singleton with a test override.

A provider constructs at most one production instance, on first use, and
lets tests install a replacement that always takes precedence.
"""

from abc import ABC, abstractmethod
from threading import Lock
from typing import Generic, Optional, TypeVar

import structlog

from ..domain.exceptions import ProviderMisuseError
from ..store.base import KeyValueStore

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class RepositoryProvider(ABC, Generic[T]):
    """
    Generic lazy singleton parameterized over the produced type.

    Providers are plain objects held by the composition root; there is no
    process-wide registry.

    Attributes:
        instance: Memoized production instance, None until first get()
        mock: Replacement returned unconditionally while installed
    """

    def __init__(self) -> None:
        self.instance: Optional[T] = None
        self.mock: Optional[T] = None
        self._lock = Lock()

    @abstractmethod
    def create(self, store: KeyValueStore) -> T:
        """
        Build a new instance backed by store.

        Must not touch provider or global state; get() memoizes the result.
        """

    def get(self, store: Optional[KeyValueStore] = None) -> T:
        """
        Return the mock, the memoized instance, or a newly created one.

        Args:
            store: Store handle used when an instance must be constructed

        Raises:
            ProviderMisuseError: If an instance must be constructed but no
                store was given
        """
        mock = self.mock
        if mock is not None:
            return mock

        instance = self.instance
        if instance is not None:
            return instance

        with self._lock:
            if self.instance is None:
                if store is None:
                    raise ProviderMisuseError(
                        type(self).__name__, "no store available to construct the repository"
                    )
                self.instance = self.create(store)
                logger.info(
                    "Repository created",
                    provider=type(self).__name__,
                    repository=type(self.instance).__name__,
                )
            return self.instance

    def install_mock(self, mock: T) -> None:
        """Make get() return mock until clear_mock() is called."""
        self.mock = mock

    def clear_mock(self) -> None:
        self.mock = None

    def reset(self) -> None:
        """Forget the memoized instance so the next get() constructs again."""
        with self._lock:
            self.instance = None
