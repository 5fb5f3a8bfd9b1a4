from __future__ import annotations

from datetime import datetime, time

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late sign-in."""

    def decide_sign_in(self, *, now: datetime, scheduled: time, late_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE, late_by_minutes=int(late_minutes))
