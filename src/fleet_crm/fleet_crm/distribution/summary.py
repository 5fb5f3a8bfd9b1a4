from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, List

from ..attendance.repository import SignInStatusRepository
from ..common.clock import Clock, SystemClock
from ..core.enums import AssignmentKind
from ..employees.repository import EmployeeRepository
from ..schedules.repository import ScheduleRepository
from .model import EmployeeSummary, RealtimeAssignment
from .repository import AssignmentLedger


class SummaryReporter:
    """Read-only projections of the ledger for operators and employees."""

    def __init__(
        self,
        schedules: ScheduleRepository,
        statuses: SignInStatusRepository,
        ledger: AssignmentLedger,
        employees: EmployeeRepository,
        *,
        clock: Clock | None = None,
    ):
        self._schedules = schedules
        self._statuses = statuses
        self._ledger = ledger
        self._employees = employees
        self._clock = clock or SystemClock()

    def get_distribution_summary(self) -> List[EmployeeSummary]:
        now = self._clock.now()
        statuses = self._statuses.list_for_date(now.date())
        if not statuses:
            return []

        names = self._employees.get_names(s.employee_id for s in statuses)
        scheduled = Counter(e.assigned_to for e in self._schedules.list_covering_hour(hour=now.hour))
        live: Dict[AssignmentKind, Dict[str, List[str]]] = {}
        for kind in AssignmentKind:
            by_employee: Dict[str, List[str]] = defaultdict(list)
            for row in self._ledger.list_active(kind, hour_slot=now.hour):
                by_employee[row.employee_id].append(row.entity_id)
            live[kind] = by_employee

        out: List[EmployeeSummary] = []
        for s in statuses:
            task_ids = live[AssignmentKind.TASK].get(s.employee_id, [])
            client_ids = live[AssignmentKind.CLIENT].get(s.employee_id, [])
            out.append(
                EmployeeSummary(
                    employee_id=s.employee_id,
                    full_name=names.get(s.employee_id),
                    is_signed_in=s.is_signed_in,
                    is_late=s.is_late,
                    active_task_count=len(task_ids),
                    active_client_count=len(client_ids),
                    scheduled_count=scheduled.get(s.employee_id, 0),
                    task_ids=list(task_ids),
                    client_ids=list(client_ids),
                )
            )
        return out

    def get_my_assignments(self, employee_id: str) -> Dict[str, List[RealtimeAssignment]]:
        """Every live row of one employee, any hour."""
        return {
            "tasks": list(self._ledger.list_active(AssignmentKind.TASK, employee_id=employee_id)),
            "clients": list(self._ledger.list_active(AssignmentKind.CLIENT, employee_id=employee_id)),
        }
