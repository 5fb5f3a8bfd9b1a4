from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, time

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    late_by_minutes: int = 0


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a sign-in status."""

    @abstractmethod
    def decide_sign_in(self, *, now: datetime, scheduled: time, late_minutes: int) -> StatusDecision:
        raise NotImplementedError
