from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from ..attendance.model import RosterView
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import ConflictError, NotFoundError
from .executor import ReconciliationResult
from .model import Employee, IncomingEmployee, RosterEntry
from .naming import generate_manual_id
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchOutcome:
    result: ReconciliationResult
    entries: Sequence[RosterEntry]

    def to_dict(self) -> dict:
        return {"employees": [e.to_dict() for e in self.entries], **self.result.to_dict()}


@dataclass(frozen=True)
class DeleteOutcome:
    employee_id: str
    entries: Sequence[RosterEntry]
    roster: Optional[RosterView] = None

    def to_dict(self) -> dict:
        if self.roster is not None:
            return {"deleted": self.employee_id, **self.roster.to_dict()}
        return {"deleted": self.employee_id, "employees": [e.to_dict() for e in self.entries]}


class EmployeeService:
    """Use cases on the registry: create, roster upload, delete."""

    def __init__(self, employees: EmployeeRepository, attendance: AttendanceRepository):
        self._employees = employees
        self._attendance = attendance

    def list_roster(self) -> Sequence[RosterEntry]:
        return list(self._employees.list_roster())

    def create_employee(self, *, name: Any, position: Any = None, department: Any = None) -> RosterEntry:
        name = require_non_empty(name, "name")
        employee = Employee(
            employee_id=generate_manual_id(),
            name=name,
            position=optional_text(position),
            department=optional_text(department),
            checked_in=False,
        )
        if not self._employees.create_if_name_free(employee):
            raise ConflictError(f"An employee named '{name}' already exists")

        logger.info("created employee %s", employee.employee_id)
        return RosterEntry(
            employee_id=employee.employee_id,
            name=employee.name,
            position=employee.position,
            department=employee.department,
            checked_in=False,
            attendance_recorded=False,
        )

    def reconcile_batch(self, payloads: Sequence[Any]) -> BatchOutcome:
        incoming = [IncomingEmployee.from_payload(p) for p in payloads]
        result = self._employees.reconcile(incoming) if incoming else ReconciliationResult()
        return BatchOutcome(result=result, entries=self.list_roster())

    def delete_employee(self, employee_id: Any, *, date_raw: Optional[str] = None) -> DeleteOutcome:
        employee_id = require_non_empty(employee_id, "employeeId")
        # Validate before deleting so a bad date never leaves a half-done request.
        attendance_date = parse_iso_date(date_raw.strip()) if date_raw and date_raw.strip() else None

        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("deleted employee %s", employee_id)

        if attendance_date is None:
            return DeleteOutcome(employee_id=employee_id, entries=self.list_roster())
        entries = list(self._attendance.get_roster(attendance_date))
        return DeleteOutcome(
            employee_id=employee_id,
            entries=entries,
            roster=RosterView(attendance_date=attendance_date, entries=entries),
        )
