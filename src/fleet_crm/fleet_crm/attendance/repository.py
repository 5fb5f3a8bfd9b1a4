from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, SignInStatus


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_sign_in(
        self,
        *,
        employee_id: str,
        work_date: date,
        sign_in_time: datetime,
        scheduled_time: time,
        late_by_minutes: int,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def update_sign_out(self, *, attendance_id: str, sign_out_time: datetime) -> bool:
        raise NotImplementedError

    def reopen(self, *, attendance_id: str) -> bool:
        """Clear sign_out_time so the day's record is open again."""

        raise NotImplementedError


class SignInStatusRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[SignInStatus]:
        raise NotImplementedError

    def upsert_signed_in(
        self,
        *,
        employee_id: str,
        work_date: date,
        sign_in_time: datetime,
        expected_sign_in: time,
        late_by_minutes: int,
    ) -> SignInStatus:
        """Create or refresh today's row with is_signed_in = true."""

        raise NotImplementedError

    def mark_signed_out(self, *, employee_id: str, work_date: date, sign_out_time: datetime) -> bool:
        """Flip is_signed_in to false; sign-in history fields stay."""

        raise NotImplementedError

    def list_for_date(self, work_date: date, *, signed_in_only: bool = False) -> Sequence[SignInStatus]:
        """Rows for one day ordered by employee id."""

        raise NotImplementedError
