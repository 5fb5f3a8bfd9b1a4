from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional, Sequence

from ..common.clock import Clock, SystemClock, today
from ..common.datetime_utils import minutes_late, parse_clock_time
from ..core.constants import DEFAULT_EXPECTED_SIGN_IN, DEFAULT_LATE_GRACE_MINUTES
from ..core.exceptions import ValidationError
from ..distribution.hooks import BestEffortRedistributionHook
from ..distribution.model import RestorationResult
from ..distribution.restoration import RestorationEngine
from ..employees.repository import EmployeeRepository
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, SignInStatus
from .repository import AttendanceRepository, SignInStatusRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignInResult:
    record: AttendanceRecord
    status: SignInStatus
    restoration: Optional[RestorationResult]

    @property
    def late_minutes(self) -> int:
        return self.record.late_by_minutes


class AttendanceService:
    """Sign-in / sign-out, the upstream trigger of the distribution engines.

    The attendance write comes first and is never undone by anything that
    happens downstream of it.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        statuses: SignInStatusRepository,
        employees: EmployeeRepository,
        restoration: RestorationEngine,
        hook: BestEffortRedistributionHook | None = None,
        *,
        clock: Clock | None = None,
        strategy_factory: AttendanceStrategyFactory | None = None,
        grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
        default_expected_sign_in: str = DEFAULT_EXPECTED_SIGN_IN,
    ):
        self._attendance = attendance
        self._statuses = statuses
        self._employees = employees
        self._restoration = restoration
        self._hook = hook
        self._clock = clock or SystemClock()
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._grace_minutes = int(grace_minutes)
        self._default_expected = default_expected_sign_in

    def sign_in(self, employee_id: str, *, scheduled_time: str | None = None) -> SignInResult:
        """Record a sign-in and hand the employee their scheduled work back.

        The first sign-in of the day creates the attendance record. Signing in
        again after a sign-out reopens that record and keeps the lateness of
        the first sign-in.
        """
        now = self._clock.now()
        work_date = now.date()

        if not self._employees.get_by_id(employee_id):
            raise ValidationError("Employee does not exist")

        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if record is not None and record.sign_out_time is None:
            raise ValidationError("Already signed in today")

        if record is None:
            try:
                scheduled = parse_clock_time(scheduled_time or self._default_expected)
            except ValueError:
                raise ValidationError("Scheduled time must look like HH:MM") from None

            late = minutes_late(now, scheduled)
            strategy = self._factory.for_sign_in(late_minutes=late, grace_minutes=self._grace_minutes)
            decision = strategy.decide_sign_in(now=now, scheduled=scheduled, late_minutes=late)

            record = self._attendance.create_sign_in(
                employee_id=employee_id,
                work_date=work_date,
                sign_in_time=now,
                scheduled_time=scheduled,
                late_by_minutes=decision.late_by_minutes,
                status=decision.status,
            )
        else:
            self._attendance.reopen(attendance_id=record.attendance_id)
            record = replace(record, sign_out_time=None)
            logger.info("%s signed in again after signing out at %s", employee_id, now.strftime("%H:%M:%S"))

        status = self._statuses.upsert_signed_in(
            employee_id=employee_id,
            work_date=work_date,
            sign_in_time=now,
            expected_sign_in=record.scheduled_time or parse_clock_time(self._default_expected),
            late_by_minutes=record.late_by_minutes,
        )
        logger.info(
            "%s signed in at %s (%s, late by %d min)",
            employee_id,
            now.strftime("%H:%M:%S"),
            record.status.value,
            record.late_by_minutes,
        )

        restoration = self._restore(employee_id)
        self._trigger_hook("sign-in", employee_id)
        return SignInResult(record=record, status=status, restoration=restoration)

    def sign_out(self, employee_id: str) -> AttendanceRecord:
        now = self._clock.now()
        work_date = now.date()

        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if not record:
            raise ValidationError("Not signed in today")
        if record.sign_out_time is not None:
            raise ValidationError("Already signed out today")

        self._attendance.update_sign_out(attendance_id=record.attendance_id, sign_out_time=now)
        self._statuses.mark_signed_out(employee_id=employee_id, work_date=work_date, sign_out_time=now)
        logger.info("%s signed out at %s", employee_id, now.strftime("%H:%M:%S"))

        self._trigger_hook("sign-out", employee_id)
        return replace(record, sign_out_time=now)

    def get_sign_in_status(self, employee_id: str, on: date | None = None) -> Optional[SignInStatus]:
        return self._statuses.get_for_employee_and_date(employee_id, on or today(self._clock))

    def get_active_employees(self) -> Sequence[SignInStatus]:
        return self._statuses.list_for_date(today(self._clock), signed_in_only=True)

    def _restore(self, employee_id: str) -> Optional[RestorationResult]:
        try:
            return self._restoration.restore_on_late_sign_in(employee_id)
        except Exception:
            logger.exception("Restoring assignments failed for %s; sign-in kept", employee_id)
            return None

    def _trigger_hook(self, reason: str, employee_id: str) -> None:
        if self._hook is not None:
            self._hook.trigger(reason=reason, employee_id=employee_id)
