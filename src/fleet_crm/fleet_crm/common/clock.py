from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Protocol

from .datetime_utils import now_local


class Clock(Protocol):
    """Source of "now" for everything that windows by hour or by day."""

    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    def now(self) -> datetime:
        return now_local()


class FixedClock:
    """Clock pinned to a given instant; advance it explicitly."""

    def __init__(self, instant: datetime):
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = instant

    def advance(self, **kwargs) -> None:
        self._instant = self._instant + timedelta(**kwargs)


def current_hour(clock: Clock) -> int:
    return clock.now().hour


def today(clock: Clock) -> date:
    return clock.now().date()
