"""
In-process key-value store.

Keeps entries in a dict guarded by a lock and serves asynchronous calls
from a worker thread pool, so async completions arrive on store-managed
threads just like a distributed cache client.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock
from typing import Dict, List, Optional, Tuple

import structlog

from ..domain.entities import User
from .base import KeyValueStore

logger = structlog.get_logger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """
    Thread-safe in-memory store with asynchronous get/put.

    Attributes:
        name: Cache name
        max_workers: Size of the worker pool completing async calls
    """

    def __init__(self, name: str = "exampleCache", max_workers: int = 4) -> None:
        """
        Initialize store.

        Args:
            name: Cache name used in logs
            max_workers: Number of worker threads for async operations
        """
        self.name = name
        self.max_workers = max_workers
        self._entries: Dict[str, User] = {}
        self._lock = Lock()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=f"store-{name}"
        )
        logger.info("Initialized in-memory store", cache=name, workers=max_workers)

    def get(self, key: str) -> Optional[User]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: User) -> Optional[User]:
        with self._lock:
            previous = self._entries.get(key)
            self._entries[key] = value
            return previous

    def remove(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def scan(self) -> List[Tuple[str, User]]:
        with self._lock:
            return list(self._entries.items())

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info("Cleared store", cache=self.name, count=count)

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def get_async(self, key: str) -> "Future[Optional[User]]":
        return self._executor.submit(self.get, key)

    def put_async(self, key: str, value: User) -> "Future[Optional[User]]":
        return self._executor.submit(self.put, key, value)

    def close(self) -> None:
        self._executor.shutdown(wait=True)
        logger.info("Closed in-memory store", cache=self.name)
