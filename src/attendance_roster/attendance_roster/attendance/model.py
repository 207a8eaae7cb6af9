from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from ..common.datetime_utils import format_date_key
from ..employees.model import RosterEntry


@dataclass(frozen=True)
class RosterView:
    """Every employee plus one date's attendance state.

    `has_attendance_records` tells "nobody checked in" apart from "nothing
    captured yet for this date".
    """

    attendance_date: date
    entries: Sequence[RosterEntry]

    @property
    def has_attendance_records(self) -> bool:
        return any(e.attendance_recorded for e in self.entries)

    def to_dict(self) -> dict:
        return {
            "employees": [e.to_dict() for e in self.entries],
            "hasAttendanceRecords": self.has_attendance_records,
            "date": format_date_key(self.attendance_date),
        }


@dataclass(frozen=True)
class ClearResult:
    attendance_date: date
    cleared: int

    def to_dict(self) -> dict:
        return {"cleared": self.cleared, "date": format_date_key(self.attendance_date)}

