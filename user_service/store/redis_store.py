"""
Redis implementation of the key-value store.

All entries of one cache live in a single Redis hash named after the
cache. Values are stored as JSON. Asynchronous calls run the blocking
client on a worker pool and surface Redis errors through the future.
"""

import json
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional, Tuple

import redis
import structlog

from ..domain.entities import User
from .base import KeyValueStore

logger = structlog.get_logger(__name__)


class RedisKeyValueStore(KeyValueStore):
    """
    Redis hash backed store.

    Attributes:
        redis: Synchronous Redis client
        name: Cache name, used as the Redis hash key
    """

    def __init__(self, redis_client: redis.Redis, name: str = "exampleCache", max_workers: int = 4):
        """
        Initialize Redis store.

        Args:
            redis_client: Synchronous Redis client
            name: Cache name (Redis hash key)
            max_workers: Number of worker threads for async operations
        """
        self.redis = redis_client
        self.name = name
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=f"redis-{name}"
        )

    @classmethod
    def from_url(cls, url: str, name: str = "exampleCache", max_workers: int = 4) -> "RedisKeyValueStore":
        """Create a store with a client connected to url."""
        client = redis.Redis.from_url(url, decode_responses=True)
        logger.info("Redis store configured", cache=name, url=url)
        return cls(client, name=name, max_workers=max_workers)

    def _encode(self, user: User) -> str:
        return json.dumps(user.to_dict())

    def _decode(self, raw: Optional[str]) -> Optional[User]:
        if raw is None:
            return None
        return User.from_dict(json.loads(raw))

    def get(self, key: str) -> Optional[User]:
        return self._decode(self.redis.hget(self.name, key))

    def put(self, key: str, value: User) -> Optional[User]:
        pipe = self.redis.pipeline()
        pipe.hget(self.name, key)
        pipe.hset(self.name, key, self._encode(value))
        previous, _ = pipe.execute()
        return self._decode(previous)

    def remove(self, key: str) -> None:
        self.redis.hdel(self.name, key)

    def scan(self) -> List[Tuple[str, User]]:
        entries = self.redis.hgetall(self.name)
        return [(key, self._decode(raw)) for key, raw in entries.items()]

    def clear(self) -> None:
        self.redis.delete(self.name)
        logger.info("Cleared store", cache=self.name)

    def size(self) -> int:
        return int(self.redis.hlen(self.name))

    def get_async(self, key: str) -> "Future[Optional[User]]":
        return self._executor.submit(self.get, key)

    def put_async(self, key: str, value: User) -> "Future[Optional[User]]":
        return self._executor.submit(self.put, key, value)

    def close(self) -> None:
        self._executor.shutdown(wait=True)
        self.redis.close()
        logger.info("Redis store closed", cache=self.name)
