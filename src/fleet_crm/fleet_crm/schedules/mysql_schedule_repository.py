from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, new_id, optional_str
from .model import ScheduleEntry
from .repository import ScheduleRepository

_COLUMNS = "id, hour_start, hour_end, task_id, client_id, assigned_to, created_by, is_recurring"


def _to_entry(r: dict) -> ScheduleEntry:
    return ScheduleEntry(
        schedule_id=str(r["id"]),
        hour_start=int(r["hour_start"]),
        hour_end=int(r["hour_end"]),
        task_id=optional_str(r.get("task_id")),
        client_id=optional_str(r.get("client_id")),
        assigned_to=str(r["assigned_to"]),
        created_by=str(r["created_by"]),
        is_recurring=as_bool(r.get("is_recurring")),
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        hour_start: int,
        hour_end: int,
        task_id: Optional[str],
        client_id: Optional[str],
        assigned_to: str,
        created_by: str,
        is_recurring: bool,
    ) -> ScheduleEntry:
        entry = ScheduleEntry(
            schedule_id=new_id(),
            hour_start=int(hour_start),
            hour_end=int(hour_end),
            task_id=task_id,
            client_id=client_id,
            assigned_to=assigned_to,
            created_by=created_by,
            is_recurring=bool(is_recurring),
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO distribution_schedule({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    entry.schedule_id,
                    entry.hour_start,
                    entry.hour_end,
                    entry.task_id,
                    entry.client_id,
                    entry.assigned_to,
                    entry.created_by,
                    int(entry.is_recurring),
                ),
            )
        return entry

    def delete(self, *, schedule_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM distribution_schedule WHERE id=%s", (schedule_id,))
            return cur.rowcount > 0

    def list_covering_hour(
        self,
        *,
        hour: int,
        assigned_to: Optional[str] = None,
        recurring_only: bool = False,
    ) -> Sequence[ScheduleEntry]:
        clauses = ["hour_start <= %s", "hour_end >= %s"]
        params: list[object] = [int(hour), int(hour)]
        if assigned_to is not None:
            clauses.append("assigned_to=%s")
            params.append(assigned_to)
        if recurring_only:
            clauses.append("is_recurring=1")

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM distribution_schedule
                WHERE {where}
                ORDER BY hour_start ASC, created_at ASC, id ASC
                """,
                tuple(params),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def list_all_joined(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    ds.id,
                    ds.hour_start,
                    ds.hour_end,
                    ds.task_id,
                    ds.client_id,
                    ds.assigned_to,
                    ds.created_by,
                    ds.is_recurring,
                    t.title AS task_title,
                    c.name AS client_name,
                    u.full_name AS assignee_name
                FROM distribution_schedule ds
                LEFT JOIN tasks t ON t.id = ds.task_id
                LEFT JOIN clients c ON c.id = ds.client_id
                JOIN users u ON u.id = ds.assigned_to
                ORDER BY ds.hour_start ASC, ds.created_at ASC
                """
            )
            out: list[dict] = []
            for r in fetchall(cur):
                entry = _to_entry(r)
                out.append(
                    {
                        "id": entry.schedule_id,
                        "hour_start": entry.hour_start,
                        "hour_end": entry.hour_end,
                        "window": f"{entry.hour_start:02d}:00-{entry.hour_end:02d}:59",
                        "task_id": entry.task_id,
                        "client_id": entry.client_id,
                        "task_title": r.get("task_title"),
                        "client_name": r.get("client_name"),
                        "assigned_to": entry.assigned_to,
                        "assignee_name": r["assignee_name"],
                        "created_by": entry.created_by,
                        "is_recurring": entry.is_recurring,
                    }
                )
            return out
