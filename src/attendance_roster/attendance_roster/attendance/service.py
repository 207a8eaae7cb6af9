from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_date, resolve_date
from ..common.validators import require_bool, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import RosterEntry
from .model import ClearResult, RosterView
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _require_date(raw: Any):
    if raw is None or not str(raw).strip():
        raise ValidationError("date is required (YYYY-MM-DD)")
    return parse_iso_date(str(raw).strip())


class AttendanceService:
    """Use cases scoped to one calendar date: read the roster, mark, clear."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def get_roster(self, date_raw: Optional[str] = None) -> RosterView:
        attendance_date = resolve_date(date_raw)
        return RosterView(attendance_date=attendance_date, entries=list(self._attendance.get_roster(attendance_date)))

    def mark_attendance(self, *, employee_id: Any, checked_in: Any, date_raw: Any) -> RosterEntry:
        employee_id = require_non_empty(employee_id, "id")
        checked_in = require_bool(checked_in, "checkedIn")
        attendance_date = _require_date(date_raw)

        entry = self._attendance.mark(employee_id=employee_id, attendance_date=attendance_date, checked_in=checked_in)
        if entry is None:
            raise NotFoundError("Employee not found")
        return entry

    def clear_date(self, date_raw: Any) -> ClearResult:
        attendance_date = _require_date(date_raw)
        cleared = self._attendance.clear_date(attendance_date)
        logger.info("cleared %d attendance records for %s", cleared, attendance_date)
        return ClearResult(attendance_date=attendance_date, cleared=cleared)
