"""
Cache-backed implementation of the user repository.

Bridges the store's future/listener based calls into SingleResult and
SnapshotSequence. The cache is the system of record: entries are keyed by
User.id and nothing else is indexed here.
"""

from concurrent.futures import Future
from typing import Callable, List, Optional

import structlog

from ..core.results import SingleResult, SnapshotSequence
from ..domain.entities import SEED_USERS, User
from ..domain.exceptions import StoreFailureError
from ..metrics import track_repository_operation
from ..store.base import KeyValueStore
from .user_repository import UserRepository

logger = structlog.get_logger(__name__)


class CacheUserRepository(UserRepository):
    """
    UserRepository over a KeyValueStore.

    - find_by_id: async get, None resolves EMPTY
    - save: async put, resolves with the argument itself (no re-read)
    - delete: synchronous remove, always completes
    - find_all: synchronous scan, taken when iteration starts

    Store faults are wrapped in StoreFailureError and never retried.
    """

    def __init__(self, store: KeyValueStore):
        """
        Initialize repository.

        Args:
            store: Key-value store acting as the system of record
        """
        self.store = store

    async def init(self) -> None:
        try:
            self.store.clear()
            for user in SEED_USERS:
                self.store.put(user.id, user)
            for user in SEED_USERS:
                seeded = self.store.get(user.id)
                logger.info("Seeded user", id=seeded.id, login=seeded.login, age=seeded.age)
        except Exception as e:
            track_repository_operation("init", "error")
            raise StoreFailureError("init", e) from e
        track_repository_operation("init", "empty")

    def find_by_id(self, user_id: str) -> SingleResult[User]:
        result: SingleResult[User] = SingleResult("find_by_id")

        def on_complete(future: "Future[Optional[User]]") -> None:
            error = self._future_error(future)
            if error is not None:
                self._fail(result, "get", error, id=user_id)
                return
            user = future.result()
            if user is None:
                logger.debug("User not found", id=user_id)
                track_repository_operation("find_by_id", "empty")
                result.success()
            else:
                track_repository_operation("find_by_id", "value")
                result.success(user)

        self._submit(result, "get", lambda: self.store.get_async(user_id), on_complete)
        return result

    def save(self, user: User) -> SingleResult[User]:
        result: SingleResult[User] = SingleResult("save")

        def on_complete(future: "Future[Optional[User]]") -> None:
            error = self._future_error(future)
            if error is not None:
                self._fail(result, "put", error, id=user.id)
                return
            logger.debug("Saved user", id=user.id, replaced=future.result() is not None)
            track_repository_operation("save", "value")
            result.success(user)

        self._submit(result, "put", lambda: self.store.put_async(user.id, user), on_complete)
        return result

    def delete(self, user: User) -> SingleResult[None]:
        result: SingleResult[None] = SingleResult("delete")
        try:
            self.store.remove(user.id)
        except Exception as e:
            self._fail(result, "remove", e, id=user.id)
            return result
        logger.debug("Deleted user", id=user.id)
        track_repository_operation("delete", "empty")
        result.success()
        return result

    def find_all(self) -> SnapshotSequence[User]:
        def snapshot() -> List[User]:
            try:
                users = [value for _, value in self.store.scan()]
            except Exception as e:
                track_repository_operation("find_all", "error")
                logger.error("Store scan failed", error=str(e))
                raise StoreFailureError("scan", e) from e
            track_repository_operation("find_all", "value")
            return users

        return SnapshotSequence(snapshot, operation="find_all")

    def _submit(
        self,
        result: SingleResult,
        operation: str,
        call: Callable[[], Future],
        listener: Callable[[Future], None],
    ) -> None:
        try:
            future = call()
        except Exception as e:
            self._fail(result, operation, e)
            return
        future.add_done_callback(listener)

    @staticmethod
    def _future_error(future: Future) -> Optional[BaseException]:
        if future.cancelled():
            return RuntimeError("store operation was cancelled")
        return future.exception()

    def _fail(self, result: SingleResult, operation: str, error: BaseException, **context) -> None:
        logger.error("Store operation failed", operation=operation, error=str(error), **context)
        track_repository_operation(result.operation, "error")
        result.error(StoreFailureError(operation, error))
