from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import optional_text


@dataclass(frozen=True)
class Employee:
    """Domain entity: one row of the employee registry.

    `checked_in` mirrors the most recent attendance mark (legacy clients read it).
    """

    employee_id: str
    name: str
    position: str = ""
    department: str = ""
    checked_in: bool = False


@dataclass(frozen=True)
class IncomingEmployee:
    """One record of a roster upload, as sent by the client.

    `employee_id` is None when the client did not supply one; `checked_in` is
    None unless the payload carried a real boolean.
    """

    employee_id: Optional[str]
    name: str
    position: str = ""
    department: str = ""
    checked_in: Optional[bool] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "IncomingEmployee":
        if not isinstance(payload, Mapping):
            return cls(employee_id=None, name="")
        checked_in = payload.get("checkedIn")
        return cls(
            employee_id=optional_text(payload.get("id")) or None,
            name=optional_text(payload.get("name")),
            position=optional_text(payload.get("position")),
            department=optional_text(payload.get("department")),
            checked_in=checked_in if isinstance(checked_in, bool) else None,
        )


@dataclass(frozen=True)
class RosterEntry:
    """Read-model: an employee joined with one date's attendance row (if any)."""

    employee_id: str
    name: str
    position: str
    department: str
    checked_in: bool
    attendance_recorded: bool

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "RosterEntry":
        return cls(
            employee_id=str(row["id"]),
            name=row.get("name") or "",
            position=row.get("position") or "",
            department=row.get("department") or "",
            checked_in=bool(row.get("checked_in")),
            attendance_recorded=bool(row.get("attendance_recorded")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "position": self.position,
            "department": self.department,
            "checkedIn": self.checked_in,
            "attendanceRecorded": self.attendance_recorded,
        }
