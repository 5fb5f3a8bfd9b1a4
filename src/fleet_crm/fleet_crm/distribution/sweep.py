from __future__ import annotations

import logging

from ..attendance.repository import SignInStatusRepository
from ..common.clock import Clock, SystemClock
from ..schedules.repository import ScheduleRepository
from .model import SweepReport
from .redistribution import RedistributionEngine

logger = logging.getLogger(__name__)


class HourlySweep:
    """Reconcile the current hour's schedule against sign-in state.

    Catches employees who went absent without signing out. Each scheduled
    employee is checked once per pass even when several entries reference
    them.
    """

    def __init__(
        self,
        schedules: ScheduleRepository,
        statuses: SignInStatusRepository,
        redistribution: RedistributionEngine,
        *,
        clock: Clock | None = None,
    ):
        self._schedules = schedules
        self._statuses = statuses
        self._redistribution = redistribution
        self._clock = clock or SystemClock()

    def check_and_redistribute_hourly(self) -> SweepReport:
        now = self._clock.now()
        report = SweepReport(hour=now.hour)

        for entry in self._schedules.list_covering_hour(hour=now.hour):
            employee_id = entry.assigned_to
            if employee_id in report.checked:
                continue
            report.checked.append(employee_id)

            status = self._statuses.get_for_employee_and_date(employee_id, now.date())
            if status is not None and status.is_signed_in:
                continue

            try:
                result = self._redistribution.redistribute_on_absence(employee_id)
            except Exception:
                # One employee's failure must not stop the pass.
                logger.exception("Redistribution failed for %s during hour %02d sweep", employee_id, now.hour)
                report.failed.append(employee_id)
                continue

            if result.success:
                report.redistributed.append(employee_id)
            else:
                report.unassigned.append(employee_id)

        logger.info(report.message)
        return report

    def manual_redistribute(self) -> SweepReport:
        """Operator-triggered pass, same semantics as the hourly one."""
        logger.info("Manual redistribution requested")
        return self.check_and_redistribute_hourly()
