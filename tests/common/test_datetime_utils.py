from datetime import date

import pytest

from src.attendance_roster.attendance_roster.common.datetime_utils import format_date_key, parse_iso_date, resolve_date
from src.attendance_roster.attendance_roster.core.exceptions import ValidationError


def test_parse_valid_date():
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)


@pytest.mark.parametrize("raw", ["2023-02-29", "2024-04-31", "2024-13-01", "2024-1-01", "20240101", "", "2024-01-01T00:00"])
def test_parse_rejects_non_calendar_or_malformed(raw):
    with pytest.raises(ValidationError):
        parse_iso_date(raw)


def test_resolve_blank_falls_back_to_today(fixed_today):
    assert resolve_date("  ") == fixed_today
    assert resolve_date(None) == fixed_today
    assert resolve_date(" 2025-01-02 ") == date(2025, 1, 2)


def test_format_date_key_pads():
    assert format_date_key(date(2025, 1, 2)) == "2025-01-02"
