from __future__ import annotations

from typing import Protocol, Sequence

from .executor import ReconciliationResult
from .model import Employee, IncomingEmployee, RosterEntry


class EmployeeRepository(Protocol):
    """Repository interface for the employee registry.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_roster(self) -> Sequence[RosterEntry]:
        """Undated roster: legacy `checked_in` flag, `attendance_recorded` always False."""
        raise NotImplementedError

    def create_if_name_free(self, employee: Employee) -> bool:
        """Insert unless the normalized name is taken; check and insert share one transaction."""
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError

    def reconcile(self, incoming: Sequence[IncomingEmployee]) -> ReconciliationResult:
        """Snapshot, classify and apply the batch in a single transaction."""
        raise NotImplementedError
