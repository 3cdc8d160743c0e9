"""
Store layer - key-value backends used as the system of record.
"""

from ..config import Settings
from .base import KeyValueStore
from .memory_store import InMemoryKeyValueStore
from .redis_store import RedisKeyValueStore


def create_store(settings: Settings) -> KeyValueStore:
    """
    Create the store selected by configuration.

    Args:
        settings: Application settings

    Returns:
        Configured key-value store

    Raises:
        ValueError: If STORE_BACKEND is not a known backend
    """
    backend = settings.STORE_BACKEND.lower()
    if backend == "memory":
        return InMemoryKeyValueStore(name=settings.CACHE_NAME, max_workers=settings.STORE_WORKERS)
    if backend == "redis":
        return RedisKeyValueStore.from_url(
            settings.REDIS_URL, name=settings.CACHE_NAME, max_workers=settings.STORE_WORKERS
        )
    raise ValueError(f"Unknown store backend: {settings.STORE_BACKEND}")


__all__ = ["KeyValueStore", "InMemoryKeyValueStore", "RedisKeyValueStore", "create_store"]
