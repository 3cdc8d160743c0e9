"""
Test configuration and fixtures
"""

import pytest

from user_service.domain.entities import User
from user_service.repositories.cache_repository import CacheUserRepository
from user_service.store.memory_store import InMemoryKeyValueStore


@pytest.fixture
def store():
    """Fresh in-memory store, closed after each test"""
    store = InMemoryKeyValueStore(name="testCache", max_workers=2)
    yield store
    store.close()


@pytest.fixture
def repository(store):
    """Cache-backed repository over the test store"""
    return CacheUserRepository(store)


@pytest.fixture
def sample_user():
    """Sample user for testing"""
    return User(id="7f3c1a52-0c1e-4b8e-9a55-2d0a4f1e9b11", login="alice", age=31)
