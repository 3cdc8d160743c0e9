"""
Asynchronous result types returned by the repository layer.

SingleResult is a single-assignment completion that can be resolved from
any thread (typically a store worker thread) and awaited from asyncio.
SnapshotSequence is a finite, non-restartable async iterator over a
point-in-time snapshot.
"""

import asyncio
import threading
from enum import Enum
from typing import (
    Any,
    Callable,
    Generator,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

import structlog

from ..domain.exceptions import ResultAlreadyCompletedError

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class Outcome(str, Enum):
    """States of a single-assignment result."""

    PENDING = "pending"
    VALUE = "value"
    EMPTY = "empty"
    ERROR = "error"


class SingleResult(Generic[T]):
    """
    Single-assignment completion carrying a value, nothing, or an error.

    Exactly one of success(value), success() or error(exc) may be called.
    A second call raises ResultAlreadyCompletedError in the caller's thread.

    Awaiting the result returns the value, None when the outcome is EMPTY,
    or raises the stored error. Completion may happen on any thread; each
    awaiting coroutine is woken on its own event loop via
    call_soon_threadsafe. Waiters that were cancelled before completion are
    skipped.

    Attributes:
        operation: Name of the operation producing this result (for logs)
    """

    def __init__(self, operation: str = "result") -> None:
        self.operation = operation
        self._lock = threading.Lock()
        self._completed = threading.Event()
        self._state = Outcome.PENDING
        self._value: Optional[T] = None
        self._error: Optional[BaseException] = None
        self._waiters: List[Tuple[asyncio.AbstractEventLoop, asyncio.Future]] = []

    @property
    def state(self) -> Outcome:
        return self._state

    def done(self) -> bool:
        return self._state is not Outcome.PENDING

    def success(self, value: Optional[T] = None) -> None:
        """
        Resolve the result successfully.

        Args:
            value: Resolved value; None resolves the result as EMPTY
        """
        if value is None:
            self._complete(Outcome.EMPTY, None, None)
        else:
            self._complete(Outcome.VALUE, value, None)

    def error(self, exc: BaseException) -> None:
        """
        Resolve the result with a failure.

        Args:
            exc: Exception raised to whoever awaits the result
        """
        self._complete(Outcome.ERROR, None, exc)

    def _complete(
        self, state: Outcome, value: Optional[T], exc: Optional[BaseException]
    ) -> None:
        with self._lock:
            if self._state is not Outcome.PENDING:
                raise ResultAlreadyCompletedError(self._state.value)
            self._state = state
            self._value = value
            self._error = exc
            waiters, self._waiters = self._waiters, []
            self._completed.set()

        for loop, waiter in waiters:
            try:
                loop.call_soon_threadsafe(self._deliver, waiter)
            except RuntimeError:
                # Loop already closed; the awaiting side is gone.
                logger.debug(
                    "Dropped result for closed event loop",
                    operation=self.operation,
                    state=state.value,
                )

    def _deliver(self, waiter: asyncio.Future) -> None:
        if waiter.done():
            logger.debug(
                "Dropped result for abandoned waiter",
                operation=self.operation,
                state=self._state.value,
            )
            return
        if self._state is Outcome.ERROR:
            waiter.set_exception(self._error)
        else:
            waiter.set_result(self._value)

    async def wait(self) -> Optional[T]:
        """Wait for completion and return the value (None when EMPTY)."""
        loop = asyncio.get_running_loop()
        waiter = loop.create_future()

        with self._lock:
            if self._state is Outcome.PENDING:
                self._waiters.append((loop, waiter))
            else:
                self._deliver(waiter)

        try:
            return await waiter
        except asyncio.CancelledError:
            with self._lock:
                self._waiters = [(lp, w) for lp, w in self._waiters if w is not waiter]
            raise

    def get(self, timeout: Optional[float] = None) -> Optional[T]:
        """
        Block the calling thread until completion.

        Intended for synchronous callers outside an event loop.

        Args:
            timeout: Seconds to wait, None waits forever

        Raises:
            TimeoutError: If the result is not completed in time
        """
        if not self._completed.wait(timeout):
            raise TimeoutError(f"{self.operation} did not complete in {timeout}s")
        if self._state is Outcome.ERROR:
            raise self._error
        return self._value

    def __await__(self) -> Generator[Any, None, Optional[T]]:
        return self.wait().__await__()

    def __repr__(self) -> str:
        return f"SingleResult(operation={self.operation!r}, state={self._state.value!r})"


class SnapshotSequence(Generic[T]):
    """
    Finite async sequence materialized from a point-in-time snapshot.

    The supplier is called once, when iteration starts. Each snapshot item
    is emitted once, then the sequence completes. Changes made to the
    source after the snapshot was taken are not reflected, and an exhausted
    sequence cannot be restarted: request a new one for a fresh snapshot.
    """

    def __init__(self, supplier: Callable[[], Iterable[T]], operation: str = "scan") -> None:
        self.operation = operation
        self._supplier = supplier
        self._items: Optional[Iterator[T]] = None
        self._subscribed = False

    def __aiter__(self) -> "SnapshotSequence[T]":
        return self

    async def __anext__(self) -> T:
        if not self._subscribed:
            self._subscribed = True
            self._items = iter(list(self._supplier()))
        if self._items is None:
            raise StopAsyncIteration
        try:
            return next(self._items)
        except StopIteration:
            self._items = None
            raise StopAsyncIteration

    async def collect(self) -> List[T]:
        """Drain the remaining items into a list."""
        return [item async for item in self]
