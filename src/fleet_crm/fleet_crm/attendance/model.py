from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row per employee per day."""

    attendance_id: str
    employee_id: str
    work_date: date
    sign_in_time: datetime
    sign_out_time: Optional[datetime]
    scheduled_time: Optional[time]
    late_by_minutes: int
    status: AttendanceStatus


@dataclass(frozen=True)
class SignInStatus:
    """Live presence flag read by the distribution engines.

    is_late is always late_by_minutes > 0.
    """

    employee_id: str
    work_date: date
    is_signed_in: bool
    sign_in_time: Optional[datetime] = None
    sign_out_time: Optional[datetime] = None
    expected_sign_in: Optional[time] = None
    is_late: bool = False
    late_by_minutes: int = 0
