from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .executor import ReconciliationResult, apply_plan
from .model import Employee, IncomingEmployee, RosterEntry
from .naming import normalize_name
from .reconciliation import classify
from .repository import EmployeeRepository


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=str(r["id"]),
        name=r.get("name") or "",
        position=r.get("position") or "",
        department=r.get("department") or "",
        checked_in=bool(r.get("checked_in")),
    )


class MySQLBatchWriter:
    """BatchWriter bound to the cursor of an open transaction."""

    def __init__(self, cur):
        self._cur = cur

    def update_employee(self, employee: Employee) -> None:
        self._cur.execute(
            """
            UPDATE employees
            SET name=%s, position=%s, department=%s, checked_in=%s, updated_at=CURRENT_TIMESTAMP
            WHERE id=%s
            """,
            (employee.name, employee.position, employee.department, employee.checked_in, employee.employee_id),
        )

    def upsert_employee(self, employee: Employee) -> None:
        self._cur.execute(
            """
            INSERT INTO employees(id, name, position, department, checked_in)
            VALUES(%s,%s,%s,%s,%s)
            ON DUPLICATE KEY UPDATE
                name=VALUES(name),
                position=VALUES(position),
                department=VALUES(department),
                checked_in=VALUES(checked_in),
                updated_at=CURRENT_TIMESTAMP
            """,
            (employee.employee_id, employee.name, employee.position, employee.department, employee.checked_in),
        )

    def repoint_attendance(self, old_id: str, new_id: str) -> None:
        self._cur.execute(
            "UPDATE employee_attendance SET employee_id=%s WHERE employee_id=%s",
            (new_id, old_id),
        )

    def delete_employee(self, employee_id: str) -> None:
        self._cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))

    def insert_ignore_employees(self, employees: Sequence[Employee]) -> int:
        self._cur.executemany(
            """
            INSERT IGNORE INTO employees(id, name, position, department, checked_in)
            VALUES(%s,%s,%s,%s,%s)
            """,
            [(e.employee_id, e.name, e.position, e.department, e.checked_in) for e in employees],
        )
        return max(int(self._cur.rowcount or 0), 0)


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_roster(self) -> Sequence[RosterEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, position, department, checked_in, FALSE AS attendance_recorded
                FROM employees
                ORDER BY name ASC
                """
            )
            return [RosterEntry.from_row(r) for r in fetchall(cur)]

    def create_if_name_free(self, employee: Employee) -> bool:
        key = normalize_name(employee.name)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT name FROM employees FOR UPDATE")
            if any(normalize_name(r["name"]) == key for r in fetchall(cur)):
                return False
            cur.execute(
                """
                INSERT INTO employees(id, name, position, department, checked_in)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (employee.employee_id, employee.name, employee.position, employee.department, employee.checked_in),
            )
            return True

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))
            return cur.rowcount > 0

    def reconcile(self, incoming: Sequence[IncomingEmployee]) -> ReconciliationResult:
        with db_cursor(self._conn_factory) as (_, cur):
            snapshot = self._lock_snapshot(cur)
            plan = classify(snapshot, incoming)
            return apply_plan(plan, MySQLBatchWriter(cur))

    @staticmethod
    def _lock_snapshot(cur) -> list[Employee]:
        cur.execute("SELECT id, name, position, department, checked_in FROM employees ORDER BY name ASC FOR UPDATE")
        return [_to_employee(r) for r in fetchall(cur)]
