from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from .model import Employee
from .reconciliation import ReconciliationPlan

logger = logging.getLogger(__name__)


class BatchWriter(Protocol):
    """Mutations the executor needs, all issued inside one open transaction."""

    def update_employee(self, employee: Employee) -> None:
        raise NotImplementedError

    def upsert_employee(self, employee: Employee) -> None:
        raise NotImplementedError

    def repoint_attendance(self, old_id: str, new_id: str) -> None:
        raise NotImplementedError

    def delete_employee(self, employee_id: str) -> None:
        raise NotImplementedError

    def insert_ignore_employees(self, employees: Sequence[Employee]) -> int:
        """Insert rows, silently skipping id conflicts; returns rows inserted."""
        raise NotImplementedError


@dataclass(frozen=True)
class ReconciliationResult:
    inserted: int = 0
    skipped: int = 0
    updated: int = 0
    matched_by_name: int = 0
    promoted: int = 0

    def to_dict(self) -> dict:
        return {
            "inserted": self.inserted,
            "skipped": self.skipped,
            "updated": self.updated,
            "matchedByName": self.matched_by_name,
            "promoted": self.promoted,
        }


def apply_plan(plan: ReconciliationPlan, writer: BatchWriter) -> ReconciliationResult:
    """Carry out a plan in a fixed order.

    Plain updates go first so a promoted id is never also an update target;
    inserts go last so they cannot collide with a promotion's upsert.
    """
    for action in plan.updates:
        writer.update_employee(action.employee)

    for action in plan.name_matches:
        writer.update_employee(action.employee)

    for action in plan.promotions:
        writer.upsert_employee(action.employee)
        writer.repoint_attendance(action.old_id, action.new_id)
        writer.delete_employee(action.old_id)

    new_rows = [action.employee for action in plan.inserts]
    inserted = writer.insert_ignore_employees(new_rows) if new_rows else 0

    result = ReconciliationResult(
        inserted=inserted,
        skipped=len(plan.skips) + (len(new_rows) - inserted),
        updated=len(plan.updates),
        matched_by_name=len(plan.name_matches),
        promoted=len(plan.promotions),
    )
    logger.info("reconciled batch: %s (duplicates=%d)", result.to_dict(), plan.duplicates)
    return result
