from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import ContextManager, Dict, Iterator, Protocol

from ..core.constants import DISTRIBUTION_LOCK_PREFIX
from ..core.exceptions import LockTimeoutError


def distribution_lock_key(employee_id: str, hour_slot: int) -> str:
    return f"{DISTRIBUTION_LOCK_PREFIX}:{employee_id}:{int(hour_slot)}"


class LockProvider(Protocol):
    """Named mutual exclusion around multi-step ledger writes."""

    def hold(self, key: str, *, timeout: float) -> ContextManager[None]:
        raise NotImplementedError


class InProcessLockProvider:
    """Keyed threading locks; enough when a single process owns the ledger."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}

    def _lock_for(self, key: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, key: str, *, timeout: float) -> Iterator[None]:
        lock = self._lock_for(key)
        if not lock.acquire(timeout=timeout):
            raise LockTimeoutError(f"Timed out waiting for lock {key!r}")
        try:
            yield
        finally:
            lock.release()
