from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from typing import Optional

from ..common.clock import Clock, SystemClock
from .sweep import HourlySweep

logger = logging.getLogger(__name__)


def seconds_until_next_hour(now: datetime) -> float:
    next_hour = now.replace(minute=0, second=0, microsecond=0) + timedelta(hours=1)
    return max(0.0, (next_hour - now).total_seconds())


class HourlySweepRunner:
    """Background thread that runs the sweep right after every hour boundary."""

    def __init__(self, sweep: HourlySweep, *, clock: Clock | None = None, settle_seconds: float = 1.0):
        self._sweep = sweep
        self._clock = clock or SystemClock()
        self._settle_seconds = float(settle_seconds)
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name="hourly-sweep", daemon=True)
        self._thread.start()
        logger.info("Hourly sweep runner started")

    def stop(self, timeout: float | None = 5.0) -> None:
        if not self.is_running:
            return
        self._stop.set()
        self._thread.join(timeout)
        self._thread = None
        logger.info("Hourly sweep runner stopped")

    def run_once(self) -> None:
        try:
            self._sweep.check_and_redistribute_hourly()
        except Exception:
            logger.exception("Scheduled hourly sweep failed")

    def _loop(self) -> None:
        while not self._stop.is_set():
            delay = seconds_until_next_hour(self._clock.now()) + self._settle_seconds
            if self._stop.wait(delay):
                break
            self.run_once()
