from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.clock import Clock, SystemClock, current_hour
from ..common.validators import require_hour, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import ScheduleEntry
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


class ScheduleService:
    """Admin CRUD over hour-window schedule entries."""

    def __init__(self, schedules: ScheduleRepository, *, clock: Clock | None = None):
        self._schedules = schedules
        self._clock = clock or SystemClock()

    def create_hour_schedule(
        self,
        *,
        current_role: Role,
        hour_start,
        hour_end,
        assigned_to: str,
        created_by: str,
        task_id: Optional[str] = None,
        client_id: Optional[str] = None,
        is_recurring: bool = True,
    ) -> ScheduleEntry:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can create schedules")

        start = require_hour(hour_start, "hour_start")
        end = require_hour(hour_end, "hour_end")
        if start > end:
            raise ValidationError("hour_start must not be after hour_end")

        task_id = task_id.strip() if task_id else None
        client_id = client_id.strip() if client_id else None
        if bool(task_id) == bool(client_id):
            raise ValidationError("Exactly one of task_id or client_id must be set")

        entry = self._schedules.create(
            hour_start=start,
            hour_end=end,
            task_id=task_id,
            client_id=client_id,
            assigned_to=require_non_empty(assigned_to, "assigned_to"),
            created_by=require_non_empty(created_by, "created_by"),
            is_recurring=bool(is_recurring),
        )
        logger.info(
            "Schedule %s created: %s %s -> %s for hours %d-%d",
            entry.schedule_id,
            entry.kind.value,
            entry.entity_id,
            entry.assigned_to,
            entry.hour_start,
            entry.hour_end,
        )
        return entry

    def get_all_schedules(self) -> Sequence[dict]:
        return self._schedules.list_all_joined()

    def get_current_hour_assignments(self, employee_id: str) -> Sequence[ScheduleEntry]:
        """Recurring entries of one employee that cover the current hour."""
        return self._schedules.list_covering_hour(
            hour=current_hour(self._clock),
            assigned_to=employee_id,
            recurring_only=True,
        )

    def delete_schedule(self, *, current_role: Role, schedule_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can delete schedules")

        if not self._schedules.delete(schedule_id=require_non_empty(schedule_id, "schedule_id")):
            raise NotFoundError("Schedule not found")
        logger.info("Schedule %s deleted", schedule_id)
