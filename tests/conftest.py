from __future__ import annotations

from datetime import date

import pytest

from src.attendance_roster.attendance_roster.attendance.service import AttendanceService
from src.attendance_roster.attendance_roster.common import datetime_utils
from src.attendance_roster.attendance_roster.container import build_services
from src.attendance_roster.attendance_roster.employees.model import Employee
from src.attendance_roster.attendance_roster.employees.service import EmployeeService
from src.attendance_roster.attendance_roster.main import create_app
from tests.fakes import InMemoryStore


@pytest.fixture
def fixed_today(monkeypatch) -> date:
    today = date(2025, 3, 14)
    monkeypatch.setattr(datetime_utils, "today_utc", lambda: today)
    return today


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore(
        [
            Employee("E-1", "Ana Pérez", "Supervisora", "Operaciones"),
            Employee("E-2", "Luis Gómez", "Técnico", "Mantenimiento"),
            Employee("manual-abc123", "Lee Chen", "", "Logística"),
        ]
    )


@pytest.fixture
def employee_service(store) -> EmployeeService:
    return EmployeeService(store, store)


@pytest.fixture
def attendance_service(store) -> AttendanceService:
    return AttendanceService(store)


@pytest.fixture
def app(monkeypatch, store):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=build_services(store, store))


@pytest.fixture
def client(app):
    return app.test_client()
