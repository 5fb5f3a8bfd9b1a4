from __future__ import annotations

from typing import Optional

from ..core.enums import AssignmentKind
from ..tasks.repository import TaskRepository
from .model import RealtimeAssignment
from .repository import AssignmentLedger


def assign_exclusively(
    ledger: AssignmentLedger,
    tasks: TaskRepository,
    kind: AssignmentKind,
    *,
    entity_id: str,
    employee_id: str,
    hour_slot: int,
    is_temporary: bool,
    reassigned_from: Optional[str] = None,
) -> RealtimeAssignment:
    """Make employee_id the only live owner of (entity, hour_slot).

    Deactivation must complete before the insert starts. Tasks also get their
    canonical assigned_to rewritten.
    """
    ledger.deactivate_for_entity(kind, entity_id=entity_id, hour_slot=hour_slot)
    row = ledger.insert(
        kind,
        entity_id=entity_id,
        employee_id=employee_id,
        hour_slot=hour_slot,
        is_temporary=is_temporary,
        reassigned_from=reassigned_from,
    )
    if kind == AssignmentKind.TASK:
        tasks.set_assigned_to(task_id=entity_id, employee_id=employee_id)
    return row
