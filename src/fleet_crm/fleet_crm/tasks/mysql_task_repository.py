from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .repository import TaskRepository


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def set_assigned_to(self, *, task_id: str, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE tasks SET assigned_to=%s WHERE id=%s", (employee_id, task_id))
            return cur.rowcount > 0
