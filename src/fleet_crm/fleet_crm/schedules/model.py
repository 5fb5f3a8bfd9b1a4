from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AssignmentKind


@dataclass(frozen=True)
class ScheduleEntry:
    """Intended ownership of one task or one client for an hour window.

    Admin-authored source of truth; the distribution engines only read it.
    """

    schedule_id: str
    hour_start: int
    hour_end: int
    assigned_to: str
    created_by: str
    task_id: Optional[str] = None
    client_id: Optional[str] = None
    is_recurring: bool = True

    @property
    def kind(self) -> AssignmentKind:
        return AssignmentKind.TASK if self.task_id else AssignmentKind.CLIENT

    @property
    def entity_id(self) -> str:
        return self.task_id or self.client_id or ""

    def covers(self, hour: int) -> bool:
        return self.hour_start <= hour <= self.hour_end
