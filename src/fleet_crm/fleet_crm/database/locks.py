from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from typing import Iterator

from ..core.exceptions import LockTimeoutError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


class MySQLAdvisoryLockProvider:
    """Serialize distribution sequences with MySQL GET_LOCK/RELEASE_LOCK.

    Advisory locks belong to a session, so the lock keeps its own connection
    open for the whole critical section while repositories keep using
    short-lived connections.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @contextmanager
    def hold(self, key: str, *, timeout: float) -> Iterator[None]:
        conn = self._conn_factory.connect()
        try:
            cur = conn.cursor()
            try:
                # GET_LOCK waits in whole seconds and treats 0 as "do not wait".
                cur.execute("SELECT GET_LOCK(%s, %s)", (key, max(1, math.ceil(timeout))))
                row = cur.fetchone()
                if not row or row[0] != 1:
                    raise LockTimeoutError(f"Timed out waiting for lock {key!r}")
                try:
                    yield
                finally:
                    cur.execute("SELECT RELEASE_LOCK(%s)", (key,))
                    cur.fetchone()
            finally:
                cur.close()
        finally:
            conn.close()
