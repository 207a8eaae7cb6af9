from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..employees.model import RosterEntry
from .repository import AttendanceRepository

_ROSTER_SELECT = """
    SELECT
        e.id, e.name, e.position, e.department,
        COALESCE(a.checked_in, FALSE) AS checked_in,
        (a.employee_id IS NOT NULL) AS attendance_recorded
    FROM employees e
    LEFT JOIN employee_attendance a
        ON a.employee_id = e.id AND a.attendance_date = %s
"""


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_roster(self, attendance_date: date) -> Sequence[RosterEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_ROSTER_SELECT + " ORDER BY e.name ASC", (attendance_date,))
            return [RosterEntry.from_row(r) for r in fetchall(cur)]

    def mark(self, *, employee_id: str, attendance_date: date, checked_in: bool) -> Optional[RosterEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM employees WHERE id=%s FOR UPDATE", (employee_id,))
            if not fetchone(cur):
                return None

            cur.execute(
                """
                INSERT INTO employee_attendance(employee_id, attendance_date, checked_in)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE checked_in=VALUES(checked_in), updated_at=CURRENT_TIMESTAMP
                """,
                (employee_id, attendance_date, checked_in),
            )
            cur.execute(
                "UPDATE employees SET checked_in=%s, updated_at=CURRENT_TIMESTAMP WHERE id=%s",
                (checked_in, employee_id),
            )

            cur.execute(_ROSTER_SELECT + " WHERE e.id=%s", (attendance_date, employee_id))
            r = fetchone(cur)
            return RosterEntry.from_row(r) if r else None

    def clear_date(self, attendance_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id FROM employee_attendance WHERE attendance_date=%s FOR UPDATE",
                (attendance_date,),
            )
            ids = [r["employee_id"] for r in fetchall(cur)]
            if not ids:
                return 0

            cur.execute("DELETE FROM employee_attendance WHERE attendance_date=%s", (attendance_date,))
            placeholders = ",".join(["%s"] * len(ids))
            cur.execute(
                f"UPDATE employees SET checked_in=FALSE, updated_at=CURRENT_TIMESTAMP WHERE id IN ({placeholders})",
                tuple(ids),
            )
            return len(ids)
