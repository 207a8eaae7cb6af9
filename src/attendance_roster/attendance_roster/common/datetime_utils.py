from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Optional

from ..core.constants import DATE_FORMAT
from ..core.exceptions import ValidationError

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def parse_iso_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD string into a date.

    The components must form a real calendar day, so "2024-04-31" is rejected
    instead of rolling over into May.
    """
    match = _DATE_RE.match(value or "")
    if not match:
        raise ValidationError("Invalid date. Use the YYYY-MM-DD format.")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise ValidationError("Invalid date. Use the YYYY-MM-DD format.") from None


def format_date_key(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def today_utc() -> date:
    """Current UTC date.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc).date()


def resolve_date(raw: Optional[str]) -> date:
    """Date from a query/body value, falling back to today (UTC) when blank."""
    raw = (raw or "").strip()
    if not raw:
        return today_utc()
    return parse_iso_date(raw)
