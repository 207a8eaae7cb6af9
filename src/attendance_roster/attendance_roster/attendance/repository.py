from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..employees.model import RosterEntry


class AttendanceRepository(Protocol):
    def get_roster(self, attendance_date: date) -> Sequence[RosterEntry]:
        """All employees left-joined with that date's attendance, ordered by name."""
        raise NotImplementedError

    def mark(self, *, employee_id: str, attendance_date: date, checked_in: bool) -> Optional[RosterEntry]:
        """Upsert the (employee, date) row and mirror the flag onto the employee.

        Returns None, writing nothing, when the employee does not exist.
        """
        raise NotImplementedError

    def clear_date(self, attendance_date: date) -> int:
        """Delete the date's rows and reset the mirror flag of the employees they belonged to."""
        raise NotImplementedError
