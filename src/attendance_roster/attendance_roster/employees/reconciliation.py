"""Roster upload reconciliation.

`classify` is pure: it compares an incoming batch with a snapshot of the
registry and decides, record by record, what should happen. Nothing touches
the database here; `executor.apply_plan` carries the plan out.

Each record is matched by identifier first, then by normalized name, and is
inserted only when neither matches. A name match against a `manual-` employee
from a record that carries a real identifier promotes the placeholder to that
identifier instead of creating a second employee.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set, Union

from ..core.enums import SkipReason
from .model import Employee, IncomingEmployee
from .naming import generate_manual_id, is_manual_id, normalize_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateById:
    employee: Employee


@dataclass(frozen=True)
class UpdateByName:
    employee: Employee


@dataclass(frozen=True)
class Promote:
    old_id: str
    employee: Employee

    @property
    def new_id(self) -> str:
        return self.employee.employee_id


@dataclass(frozen=True)
class Insert:
    employee: Employee


@dataclass(frozen=True)
class Skip:
    reason: SkipReason
    record: IncomingEmployee


Action = Union[UpdateById, UpdateByName, Promote, Insert, Skip]


@dataclass
class ReconciliationPlan:
    """Actions grouped by kind; each list keeps the batch's encounter order."""

    updates: List[UpdateById] = field(default_factory=list)
    name_matches: List[UpdateByName] = field(default_factory=list)
    promotions: List[Promote] = field(default_factory=list)
    inserts: List[Insert] = field(default_factory=list)
    skips: List[Skip] = field(default_factory=list)

    def add(self, action: Action) -> None:
        if isinstance(action, UpdateById):
            self.updates.append(action)
        elif isinstance(action, UpdateByName):
            self.name_matches.append(action)
        elif isinstance(action, Promote):
            self.promotions.append(action)
        elif isinstance(action, Insert):
            self.inserts.append(action)
        else:
            self.skips.append(action)

    @property
    def duplicates(self) -> int:
        return sum(1 for s in self.skips if s.reason != SkipReason.EMPTY_NAME)


def merge(existing: Employee, record: IncomingEmployee, *, employee_id: Optional[str] = None) -> Employee:
    """Overlay the non-empty incoming fields on an existing employee."""
    return Employee(
        employee_id=employee_id or existing.employee_id,
        name=record.name or existing.name,
        position=record.position or existing.position,
        department=record.department or existing.department,
        checked_in=existing.checked_in if record.checked_in is None else record.checked_in,
    )


class _Classifier:
    def __init__(self, snapshot: Iterable[Employee]):
        self.by_id: Dict[str, Employee] = {}
        self.by_name: Dict[str, str] = {}
        for emp in snapshot:
            self.by_id[emp.employee_id] = emp
            self.by_name.setdefault(normalize_name(emp.name), emp.employee_id)
        self.claimed_ids: Set[str] = set()
        self.claimed_names: Set[str] = set()

    def classify(self, record: IncomingEmployee) -> Action:
        if not record.name.strip():
            return Skip(SkipReason.EMPTY_NAME, record)

        supplied_id = record.employee_id
        if supplied_id and supplied_id in self.claimed_ids:
            return Skip(SkipReason.DUPLICATE_ID, record)

        key = normalize_name(record.name)
        if not supplied_id and key in self.claimed_names:
            return Skip(SkipReason.DUPLICATE_NAME, record)

        existing = self.by_id.get(supplied_id) if supplied_id else None
        if existing:
            self._claim(key, supplied_id)
            self.by_name[key] = supplied_id
            return UpdateById(merge(existing, record))

        matched_id = self.by_name.get(key)
        if matched_id is not None:
            if matched_id in self.claimed_ids:
                # An earlier record of this batch already owns that employee.
                return Skip(SkipReason.DUPLICATE_NAME, record)
            matched = self.by_id[matched_id]
            if supplied_id and is_manual_id(matched_id):
                self._claim(key, supplied_id, matched_id)
                self.by_name[key] = supplied_id
                return Promote(old_id=matched_id, employee=merge(matched, record, employee_id=supplied_id))
            self._claim(key, matched_id, supplied_id)
            return UpdateByName(merge(matched, record))

        if key in self.claimed_names:
            # Pending inserts are not name-matchable; an id-bearing record with
            # the same name becomes a second row with a colliding name.
            logger.warning("admitting %s with a name already inserted in this batch", supplied_id)
        new_id = supplied_id or generate_manual_id()
        self._claim(key, new_id)
        return Insert(
            Employee(
                employee_id=new_id,
                name=record.name,
                position=record.position,
                department=record.department,
                checked_in=bool(record.checked_in),
            )
        )

    def _claim(self, key: str, *ids: Optional[str]) -> None:
        self.claimed_names.add(key)
        self.claimed_ids.update(i for i in ids if i)


def classify(snapshot: Iterable[Employee], incoming: Sequence[IncomingEmployee]) -> ReconciliationPlan:
    classifier = _Classifier(snapshot)
    plan = ReconciliationPlan()
    for record in incoming:
        plan.add(classifier.classify(record))
    return plan
