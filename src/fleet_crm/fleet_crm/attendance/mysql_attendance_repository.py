from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, new_id, normalize_mysql_time
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, date, sign_in_time, sign_out_time, scheduled_time, late_by_minutes, status
                FROM attendance
                WHERE employee_id=%s AND date=%s
                """,
                (employee_id, work_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceRecord(
                attendance_id=str(r["id"]),
                employee_id=str(r["employee_id"]),
                work_date=r["date"],
                sign_in_time=r["sign_in_time"],
                sign_out_time=r.get("sign_out_time"),
                scheduled_time=normalize_mysql_time(r.get("scheduled_time")),
                late_by_minutes=int(r["late_by_minutes"] or 0),
                status=AttendanceStatus(r["status"]),
            )

    def create_sign_in(
        self,
        *,
        employee_id: str,
        work_date: date,
        sign_in_time: datetime,
        scheduled_time: time,
        late_by_minutes: int,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        record = AttendanceRecord(
            attendance_id=new_id(),
            employee_id=employee_id,
            work_date=work_date,
            sign_in_time=sign_in_time,
            sign_out_time=None,
            scheduled_time=scheduled_time,
            late_by_minutes=int(late_by_minutes),
            status=status,
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(id, employee_id, date, sign_in_time, scheduled_time, late_by_minutes, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.attendance_id,
                    employee_id,
                    work_date,
                    sign_in_time,
                    scheduled_time,
                    record.late_by_minutes,
                    status.value,
                ),
            )
        return record

    def update_sign_out(self, *, attendance_id: str, sign_out_time: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE attendance SET sign_out_time=%s WHERE id=%s", (sign_out_time, attendance_id))
            return cur.rowcount > 0

    def reopen(self, *, attendance_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE attendance SET sign_out_time=NULL WHERE id=%s", (attendance_id,))
            return cur.rowcount > 0
