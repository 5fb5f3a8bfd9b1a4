from __future__ import annotations

from datetime import datetime, time

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class PresentStrategy(AttendanceStrategy):
    """On-time sign-in (at or before the expected time, or within grace)."""

    def decide_sign_in(self, *, now: datetime, scheduled: time, late_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, late_by_minutes=0)
