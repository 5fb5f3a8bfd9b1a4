from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AssignmentKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, new_id, optional_str
from .model import RealtimeAssignment
from .repository import AssignmentLedger

# kind -> (table, entity column)
_TABLES = {
    AssignmentKind.TASK: ("task_assignments_realtime", "task_id"),
    AssignmentKind.CLIENT: ("client_assignments_realtime", "client_id"),
}


class MySQLAssignmentLedger(AssignmentLedger):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        table, column = _TABLES[kind]
        row = RealtimeAssignment(
            assignment_id=new_id(),
            kind=kind,
            entity_id=entity_id,
            employee_id=employee_id,
            hour_slot=int(hour_slot),
            is_active=True,
            reassigned_from=reassigned_from,
            is_temporary=bool(is_temporary),
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {table}(id, {column}, employee_id, hour_slot, is_active, reassigned_from, is_temporary)
                VALUES(%s,%s,%s,%s,1,%s,%s)
                """,
                (row.assignment_id, entity_id, employee_id, row.hour_slot, reassigned_from, int(row.is_temporary)),
            )
        return row

    def _deactivate(self, kind: AssignmentKind, where: str, params: tuple) -> int:
        table, _ = _TABLES[kind]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE {table} SET is_active=0 WHERE is_active=1 AND {where}", params)
            return int(cur.rowcount or 0)

    def deactivate_for_employee(self, kind: AssignmentKind, *, employee_id: str, hour_slot: int) -> int:
        return self._deactivate(kind, "employee_id=%s AND hour_slot=%s", (employee_id, int(hour_slot)))

    def deactivate_for_entity(self, kind: AssignmentKind, *, entity_id: str, hour_slot: int) -> int:
        _, column = _TABLES[kind]
        return self._deactivate(kind, f"{column}=%s AND hour_slot=%s", (entity_id, int(hour_slot)))

    def deactivate_temporary_from(self, kind: AssignmentKind, *, reassigned_from: str) -> int:
        return self._deactivate(kind, "reassigned_from=%s AND is_temporary=1", (reassigned_from,))

    def list_active(
        self,
        kind: AssignmentKind,
        *,
        employee_id: Optional[str] = None,
        hour_slot: Optional[int] = None,
    ) -> Sequence[RealtimeAssignment]:
        table, column = _TABLES[kind]
        clauses = ["is_active=1"]
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)
        if hour_slot is not None:
            clauses.append("hour_slot=%s")
            params.append(int(hour_slot))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, {column} AS entity_id, employee_id, hour_slot, is_active, reassigned_from, is_temporary
                FROM {table}
                WHERE {where}
                ORDER BY created_at ASC
                """,
                tuple(params),
            )
            return [
                RealtimeAssignment(
                    assignment_id=str(r["id"]),
                    kind=kind,
                    entity_id=str(r["entity_id"]),
                    employee_id=str(r["employee_id"]),
                    hour_slot=int(r["hour_slot"]),
                    is_active=as_bool(r.get("is_active")),
                    reassigned_from=optional_str(r.get("reassigned_from")),
                    is_temporary=as_bool(r.get("is_temporary")),
                )
                for r in fetchall(cur)
            ]
