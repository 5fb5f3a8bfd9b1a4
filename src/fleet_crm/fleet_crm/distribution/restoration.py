from __future__ import annotations

import logging

from ..common.clock import Clock, SystemClock, current_hour
from ..common.locks import LockProvider, distribution_lock_key
from ..core.constants import DEFAULT_LOCK_TIMEOUT_SECONDS
from ..core.enums import AssignmentKind
from ..schedules.repository import ScheduleRepository
from ..tasks.repository import TaskRepository
from .assignments import assign_exclusively
from .model import RestorationResult
from .repository import AssignmentLedger

logger = logging.getLogger(__name__)


class RestorationEngine:
    """Give a signed-in employee their scheduled workload back.

    Runs on every sign-in, on time or late: temporary rows taken from the
    employee are revoked, then the current-hour schedule is re-asserted.
    """

    def __init__(
        self,
        schedules: ScheduleRepository,
        ledger: AssignmentLedger,
        tasks: TaskRepository,
        locks: LockProvider,
        *,
        clock: Clock | None = None,
        lock_timeout: float = DEFAULT_LOCK_TIMEOUT_SECONDS,
    ):
        self._schedules = schedules
        self._ledger = ledger
        self._tasks = tasks
        self._locks = locks
        self._clock = clock or SystemClock()
        self._lock_timeout = float(lock_timeout)

    def restore_on_late_sign_in(self, employee_id: str) -> RestorationResult:
        hour = current_hour(self._clock)
        restored = {AssignmentKind.TASK: 0, AssignmentKind.CLIENT: 0}

        with self._locks.hold(distribution_lock_key(employee_id, hour), timeout=self._lock_timeout):
            revoked = 0
            for kind in AssignmentKind:
                revoked += self._ledger.deactivate_temporary_from(kind, reassigned_from=employee_id)

            entries = self._schedules.list_covering_hour(hour=hour, assigned_to=employee_id)
            if not entries:
                logger.info("Revoked %d temporary rows of %s; nothing scheduled at %02d", revoked, employee_id, hour)
                return RestorationResult(success=True, message="No original assignments to restore")

            # An entity may sit in several overlapping windows; it is restored once.
            owned = list(dict.fromkeys((e.kind, e.entity_id) for e in entries))
            for kind, entity_id in owned:
                assign_exclusively(
                    self._ledger,
                    self._tasks,
                    kind,
                    entity_id=entity_id,
                    employee_id=employee_id,
                    hour_slot=hour,
                    is_temporary=False,
                )
                restored[kind] += 1

        logger.info(
            "Restored %d tasks and %d clients to %s (hour %02d, revoked %d temporary rows)",
            restored[AssignmentKind.TASK],
            restored[AssignmentKind.CLIENT],
            employee_id,
            hour,
            revoked,
        )
        return RestorationResult(
            success=True,
            message=f"Restored assignments for {len(owned)} items",
            restored_task_count=restored[AssignmentKind.TASK],
            restored_client_count=restored[AssignmentKind.CLIENT],
        )
