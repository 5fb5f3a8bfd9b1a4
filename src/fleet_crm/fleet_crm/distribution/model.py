from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..core.enums import AssignmentKind


@dataclass(frozen=True)
class RealtimeAssignment:
    """One row of the task or client realtime ledger.

    Rows are never deleted; superseded rows get is_active = False. For a given
    (entity, hour_slot) at most one row is active.
    """

    assignment_id: str
    kind: AssignmentKind
    entity_id: str
    employee_id: str
    hour_slot: int
    is_active: bool = True
    reassigned_from: Optional[str] = None
    is_temporary: bool = False


@dataclass(frozen=True)
class RedistributionResult:
    success: bool
    message: str
    redistributed_task_count: int = 0
    redistributed_client_count: int = 0
    target_count: int = 0

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "redistributed_task_count": self.redistributed_task_count,
            "redistributed_client_count": self.redistributed_client_count,
            "target_count": self.target_count,
        }


@dataclass(frozen=True)
class RestorationResult:
    success: bool
    message: str
    restored_task_count: int = 0
    restored_client_count: int = 0

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "restored_task_count": self.restored_task_count,
            "restored_client_count": self.restored_client_count,
        }


@dataclass(frozen=True)
class EmployeeSummary:
    """Read-model for the operator dashboard (current hour)."""

    employee_id: str
    full_name: Optional[str]
    is_signed_in: bool
    is_late: bool
    active_task_count: int
    active_client_count: int
    scheduled_count: int
    task_ids: List[str] = field(default_factory=list)
    client_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee": self.full_name,
            "is_signed_in": self.is_signed_in,
            "is_late": self.is_late,
            "tasks": self.active_task_count,
            "clients": self.active_client_count,
            "scheduled": self.scheduled_count,
            "task_ids": list(self.task_ids),
            "client_ids": list(self.client_ids),
        }


@dataclass
class SweepReport:
    hour: int
    checked: List[str] = field(default_factory=list)
    redistributed: List[str] = field(default_factory=list)
    unassigned: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failed

    @property
    def message(self) -> str:
        msg = (
            f"Hour {self.hour:02d}: checked {len(self.checked)} employees, "
            f"redistributed for {len(self.redistributed)}"
        )
        if self.unassigned:
            msg += f", {len(self.unassigned)} left unassigned (no active employees)"
        if self.failed:
            msg += f", {len(self.failed)} failed"
        return msg

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "hour": self.hour,
            "redistributed": list(self.redistributed),
            "unassigned": list(self.unassigned),
            "failed": list(self.failed),
        }
