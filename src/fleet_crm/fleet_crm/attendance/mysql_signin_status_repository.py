from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone, new_id, normalize_mysql_time
from .model import SignInStatus
from .repository import SignInStatusRepository

_COLUMNS = (
    "employee_id, date, is_signed_in, sign_in_time, sign_out_time, expected_sign_in, is_late, late_by_minutes"
)


def _to_status(r: dict) -> SignInStatus:
    return SignInStatus(
        employee_id=str(r["employee_id"]),
        work_date=r["date"],
        is_signed_in=as_bool(r.get("is_signed_in")),
        sign_in_time=r.get("sign_in_time"),
        sign_out_time=r.get("sign_out_time"),
        expected_sign_in=normalize_mysql_time(r.get("expected_sign_in")),
        is_late=as_bool(r.get("is_late")),
        late_by_minutes=int(r.get("late_by_minutes") or 0),
    )


class MySQLSignInStatusRepository(SignInStatusRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[SignInStatus]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employee_signin_status WHERE employee_id=%s AND date=%s",
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_status(r) if r else None

    def upsert_signed_in(
        self,
        *,
        employee_id: str,
        work_date: date,
        sign_in_time: datetime,
        expected_sign_in: time,
        late_by_minutes: int,
    ) -> SignInStatus:
        late = max(0, int(late_by_minutes))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employee_signin_status(
                    id, employee_id, date, is_signed_in, sign_in_time, expected_sign_in, is_late, late_by_minutes
                )
                VALUES(%s,%s,%s,1,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    is_signed_in=1,
                    sign_in_time=VALUES(sign_in_time),
                    expected_sign_in=VALUES(expected_sign_in),
                    is_late=VALUES(is_late),
                    late_by_minutes=VALUES(late_by_minutes)
                """,
                (new_id(), employee_id, work_date, sign_in_time, expected_sign_in, int(late > 0), late),
            )
        return SignInStatus(
            employee_id=employee_id,
            work_date=work_date,
            is_signed_in=True,
            sign_in_time=sign_in_time,
            expected_sign_in=expected_sign_in,
            is_late=late > 0,
            late_by_minutes=late,
        )

    def mark_signed_out(self, *, employee_id: str, work_date: date, sign_out_time: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employee_signin_status
                SET is_signed_in=0, sign_out_time=%s
                WHERE employee_id=%s AND date=%s
                """,
                (sign_out_time, employee_id, work_date),
            )
            return cur.rowcount > 0

    def list_for_date(self, work_date: date, *, signed_in_only: bool = False) -> Sequence[SignInStatus]:
        where = "date=%s AND is_signed_in=1" if signed_in_only else "date=%s"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employee_signin_status WHERE {where} ORDER BY employee_id ASC",
                (work_date,),
            )
            return [_to_status(r) for r in fetchall(cur)]
