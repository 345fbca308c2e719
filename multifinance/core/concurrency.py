"""Deadlines and keyed locks for use-case execution."""

import asyncio
import functools
from collections import defaultdict
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable, Dict, Hashable, TypeVar

import structlog

from multifinance.core.metrics import record_operation_timeout
from multifinance.domain.exceptions import OperationTimeoutException

logger = structlog.get_logger(__name__)

T = TypeVar("T")


def with_deadline(method: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """
    Bound a service coroutine method by the service's ``_timeout``.

    The wrapped call is cancelled when the deadline passes, which aborts
    any in-flight storage call, and OperationTimeoutException is raised
    instead. No retry is attempted.
    """

    @functools.wraps(method)
    async def wrapper(self, *args, **kwargs) -> T:
        timeout = self._timeout
        try:
            return await asyncio.wait_for(method(self, *args, **kwargs), timeout=timeout)
        except asyncio.TimeoutError:
            operation = f"{type(self).__name__}.{method.__name__}"
            logger.error("operation_timeout", operation=operation, timeout=timeout)
            record_operation_timeout(operation)
            raise OperationTimeoutException(operation, timeout)

    return wrapper


class KeyedLock:
    """
    A registry of asyncio locks, one per key.

    Holders of different keys never block each other. A key's lock is
    dropped from the registry once nobody holds or waits for it.
    """

    def __init__(self) -> None:
        self._locks: Dict[Hashable, asyncio.Lock] = {}
        self._users: Dict[Hashable, int] = defaultdict(int)

    @asynccontextmanager
    async def acquire(self, key: Hashable) -> AsyncGenerator[None, None]:
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] += 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                self._locks.pop(key, None)

    def locked(self, key: Hashable) -> bool:
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)


# Serializes price -> write per loan id within this process.
loan_locks = KeyedLock()
