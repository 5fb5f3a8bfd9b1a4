from __future__ import annotations

from typing import Dict, Iterable, Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, user_id, full_name, role, is_active
                FROM users
                WHERE id=%s
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Employee(
                employee_id=str(r["id"]),
                user_code=str(r["user_id"]),
                full_name=r["full_name"],
                role=Role(r["role"]),
                is_active=as_bool(r.get("is_active")),
            )

    def get_names(self, employee_ids: Iterable[str]) -> Dict[str, str]:
        ids = sorted({str(e) for e in employee_ids})
        if not ids:
            return {}

        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT id, full_name FROM users WHERE id IN ({placeholders})", tuple(ids))
            return {str(r["id"]): r["full_name"] for r in fetchall(cur)}
