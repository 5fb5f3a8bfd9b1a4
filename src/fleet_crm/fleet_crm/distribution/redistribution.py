from __future__ import annotations

import logging
from typing import List, Sequence

from ..attendance.repository import SignInStatusRepository
from ..common.clock import Clock, SystemClock, current_hour, today
from ..common.locks import LockProvider, distribution_lock_key
from ..core.constants import DEFAULT_LOCK_TIMEOUT_SECONDS
from ..core.enums import AssignmentKind
from ..schedules.model import ScheduleEntry
from ..schedules.repository import ScheduleRepository
from ..tasks.repository import TaskRepository
from .assignments import assign_exclusively
from .model import RedistributionResult
from .repository import AssignmentLedger

logger = logging.getLogger(__name__)


def round_robin(items: Sequence[str], targets: Sequence[str]) -> List[tuple[str, str]]:
    """Pair items[i] with targets[i % len(targets)]."""
    if not targets:
        return []
    return [(item, targets[i % len(targets)]) for i, item in enumerate(items)]


class RedistributionEngine:
    """Spread an absent employee's current-hour workload over the signed-in employees.

    Tasks and clients are dealt round-robin from index 0 independently, so each
    active employee ends up with floor(M/N) or ceil(M/N) items of each kind.
    New ledger rows are temporary and remember who they were taken from, which
    is what the restoration engine later revokes.
    """

    def __init__(
        self,
        schedules: ScheduleRepository,
        statuses: SignInStatusRepository,
        ledger: AssignmentLedger,
        tasks: TaskRepository,
        locks: LockProvider,
        *,
        clock: Clock | None = None,
        lock_timeout: float = DEFAULT_LOCK_TIMEOUT_SECONDS,
    ):
        self._schedules = schedules
        self._statuses = statuses
        self._ledger = ledger
        self._tasks = tasks
        self._locks = locks
        self._clock = clock or SystemClock()
        self._lock_timeout = float(lock_timeout)

    def active_employee_ids(self) -> List[str]:
        rows = self._statuses.list_for_date(today(self._clock), signed_in_only=True)
        return sorted({r.employee_id for r in rows if r.is_signed_in})

    def redistribute_on_absence(self, absent_employee_id: str) -> RedistributionResult:
        hour = current_hour(self._clock)

        with self._locks.hold(distribution_lock_key(absent_employee_id, hour), timeout=self._lock_timeout):
            entries = self._schedules.list_covering_hour(hour=hour, assigned_to=absent_employee_id)
            if not entries:
                logger.info("No hour %02d assignments to redistribute for %s", hour, absent_employee_id)
                return RedistributionResult(success=True, message="No assignments to redistribute")

            active = self.active_employee_ids()

            for kind in AssignmentKind:
                self._ledger.deactivate_for_employee(kind, employee_id=absent_employee_id, hour_slot=hour)

            if not active:
                logger.warning(
                    "No active employees to take over %d hour %02d items from %s",
                    len(entries),
                    hour,
                    absent_employee_id,
                )
                return RedistributionResult(success=False, message="No active employees to redistribute to")

            task_count = self._deal(entries, AssignmentKind.TASK, active, absent_employee_id, hour)
            client_count = self._deal(entries, AssignmentKind.CLIENT, active, absent_employee_id, hour)

        logger.info(
            "Redistributed %d tasks and %d clients of %s across %d employees (hour %02d)",
            task_count,
            client_count,
            absent_employee_id,
            len(active),
            hour,
        )
        return RedistributionResult(
            success=True,
            message=f"Redistributed {task_count} tasks and {client_count} clients",
            redistributed_task_count=task_count,
            redistributed_client_count=client_count,
            target_count=len(active),
        )

    def _deal(
        self,
        entries: Sequence[ScheduleEntry],
        kind: AssignmentKind,
        active: Sequence[str],
        absent_employee_id: str,
        hour: int,
    ) -> int:
        entity_ids = list(dict.fromkeys(e.entity_id for e in entries if e.kind == kind))
        for entity_id, target in round_robin(entity_ids, active):
            assign_exclusively(
                self._ledger,
                self._tasks,
                kind,
                entity_id=entity_id,
                employee_id=target,
                hour_slot=hour,
                is_temporary=True,
                reassigned_from=absent_employee_id,
            )
        return len(entity_ids)
