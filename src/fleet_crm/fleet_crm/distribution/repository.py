from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AssignmentKind
from .model import RealtimeAssignment


class AssignmentLedger(Protocol):
    """Realtime ownership ledger; each method addresses one of the two tables by kind."""

    def insert(
        self,
        kind: AssignmentKind,
        *,
        entity_id: str,
        employee_id: str,
        hour_slot: int,
        is_temporary: bool,
        reassigned_from: Optional[str] = None,
    ) -> RealtimeAssignment:
        raise NotImplementedError

    def deactivate_for_employee(self, kind: AssignmentKind, *, employee_id: str, hour_slot: int) -> int:
        """Deactivate live rows owned by the employee in one hour slot. Returns rows touched."""

        raise NotImplementedError

    def deactivate_for_entity(self, kind: AssignmentKind, *, entity_id: str, hour_slot: int) -> int:
        raise NotImplementedError

    def deactivate_temporary_from(self, kind: AssignmentKind, *, reassigned_from: str) -> int:
        """Deactivate live temporary rows created on behalf of an absent employee."""

        raise NotImplementedError

    def list_active(
        self,
        kind: AssignmentKind,
        *,
        employee_id: Optional[str] = None,
        hour_slot: Optional[int] = None,
    ) -> Sequence[RealtimeAssignment]:
        raise NotImplementedError
