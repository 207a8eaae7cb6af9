from __future__ import annotations

import pytest

from src.attendance_roster.attendance_roster.core.exceptions import ConfigurationError

URL = "/api/employees"


def test_get_roster_for_date(client):
    resp = client.get(URL, query_string={"date": "2025-03-10"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["date"] == "2025-03-10"
    assert body["hasAttendanceRecords"] is False
    assert body["employees"][0] == {
        "id": "E-1",
        "name": "Ana Pérez",
        "position": "Supervisora",
        "department": "Operaciones",
        "checkedIn": False,
        "attendanceRecorded": False,
    }


def test_get_roster_defaults_to_today(client, fixed_today):
    assert client.get(URL).get_json()["date"] == "2025-03-14"


def test_get_roster_bad_date(client):
    resp = client.get(URL, query_string={"date": "2025-02-30"})

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_netlify_path_alias(client):
    assert client.get("/.netlify/functions/employees", query_string={"date": "2025-03-10"}).status_code == 200


def test_cors_headers_and_preflight(client):
    resp = client.options(URL)

    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert resp.headers["Access-Control-Allow-Methods"] == "GET,POST,PATCH,DELETE,OPTIONS"
    assert resp.headers["Access-Control-Allow-Headers"] == "Content-Type"


def test_unsupported_method(client):
    resp = client.put(URL, json={})

    assert resp.status_code == 405
    assert "error" in resp.get_json()
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_health_probe_on_any_method(client):
    assert client.get(URL, query_string={"health": "1"}).get_json() == {"ok": True}
    assert client.delete(URL, query_string={"health": "1"}).get_json() == {"ok": True}


def test_debug_probe_hidden_unless_debug(client, app):
    assert client.get(URL, query_string={"debug": "1"}).status_code == 404

    app.config["DEBUG"] = True
    app.config["DATABASE_URL"] = "mysql://root:secret@db:3306/roster"
    body = client.get(URL, query_string={"debug": "1"}).get_json()

    assert body["dbUrlResolved"] == "mysql://***:***@db:3306/roster"
    assert body["validUrl"] is True
    assert body["method"] == "GET"


def test_create_employee(client, store):
    resp = client.post(URL, json={"employee": {"name": "Marta", "department": "Cocina"}})

    assert resp.status_code == 201
    employee = resp.get_json()["employee"]
    assert employee["id"].startswith("manual-")
    assert employee["department"] == "Cocina"
    assert employee["id"] in store.employees


def test_create_employee_empty_name(client, store):
    resp = client.post(URL, json={"employee": {"name": ""}})

    assert resp.status_code == 400
    assert len(store.employees) == 3


def test_create_employee_name_conflict(client):
    assert client.post(URL, json={"employee": {"name": "Lee"}}).status_code == 201

    resp = client.post(URL, json={"employee": {"name": "lee"}})
    assert resp.status_code == 409
    assert "error" in resp.get_json()


def test_batch_reconcile_counts(client):
    resp = client.post(
        URL,
        json={
            "employees": [
                {"id": "E-1", "name": "Ana Pérez", "position": "Gerente"},
                {"name": "luis gomez"},
                {"id": "EXT-5", "name": "Lee Chen"},
                {"id": "N-1", "name": "Nuevo"},
                {"name": ""},
            ]
        },
    )

    body = resp.get_json()
    assert resp.status_code == 200
    assert {k: body[k] for k in ("inserted", "skipped", "updated", "matchedByName", "promoted")} == {
        "inserted": 1,
        "skipped": 1,
        "updated": 1,
        "matchedByName": 1,
        "promoted": 1,
    }
    assert sorted(e["id"] for e in body["employees"]) == ["E-1", "E-2", "EXT-5", "N-1"]


def test_batch_scenario_same_name_twice(client, store):
    store.employees.clear()

    body = client.post(URL, json={"employees": [{"name": "Ana Pérez"}, {"name": "ana perez"}]}).get_json()

    assert body["inserted"] == 1
    assert body["skipped"] == 1


def test_post_rejects_non_list_employees(client):
    assert client.post(URL, json={"employees": "nope"}).status_code == 400


def test_malformed_json_body(client):
    resp = client.post(URL, data="{not json", content_type="application/json")

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_patch_marks_attendance(client):
    resp = client.patch(URL, json={"id": "E-2", "checkedIn": True, "date": "2025-03-10"})

    assert resp.status_code == 200
    assert resp.get_json()["employee"]["checkedIn"] is True

    roster = client.get(URL, query_string={"date": "2025-03-10"}).get_json()
    recorded = {e["id"]: e["attendanceRecorded"] for e in roster["employees"]}
    assert recorded == {"E-1": False, "manual-abc123": False, "E-2": True}
    assert roster["hasAttendanceRecords"] is True


def test_patch_unknown_employee(client, store):
    resp = client.patch(URL, json={"id": "ghost", "checkedIn": True, "date": "2025-03-10"})

    assert resp.status_code == 404
    assert store.attendance == {}


@pytest.mark.parametrize(
    "payload",
    [
        {"id": "E-1", "checkedIn": "true", "date": "2025-03-10"},
        {"id": "E-1", "checkedIn": True},
        {"checkedIn": True, "date": "2025-03-10"},
    ],
)
def test_patch_validation(client, payload):
    assert client.patch(URL, json=payload).status_code == 400


def test_delete_clears_date(client):
    client.patch(URL, json={"id": "E-1", "checkedIn": True, "date": "2025-03-10"})

    resp = client.delete(URL, json={"date": "2025-03-10"})

    assert resp.get_json() == {"cleared": 1, "date": "2025-03-10"}
    roster = client.get(URL, query_string={"date": "2025-03-10"}).get_json()
    assert all(not e["checkedIn"] and not e["attendanceRecorded"] for e in roster["employees"])


def test_delete_requires_date_or_employee(client):
    assert client.delete(URL).status_code == 400


def test_delete_employee_by_query(client, store):
    resp = client.delete(URL, query_string={"employeeId": "E-2", "date": "2025-03-10"})

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["deleted"] == "E-2"
    assert body["date"] == "2025-03-10"
    assert "E-2" not in store.employees


def test_delete_unknown_employee(client):
    assert client.delete(URL, json={"employeeId": "nope"}).status_code == 404


def test_unexpected_errors_are_redacted(client, store, monkeypatch):
    def explode(attendance_date):
        raise RuntimeError("lost connection to mysql://root:hunter2@db/roster")

    monkeypatch.setattr(store, "get_roster", explode)

    resp = client.get(URL, query_string={"date": "2025-03-10"})

    body = resp.get_json()
    assert resp.status_code == 500
    assert body["error"] == "Internal server error"
    assert "hunter2" not in body["detail"]


def test_configuration_errors_carry_a_hint_without_detail(client, store, monkeypatch):
    def unreachable(attendance_date):
        raise ConfigurationError("Database is unreachable or misconfigured", hint="Check DATABASE_URL.")

    monkeypatch.setattr(store, "get_roster", unreachable)

    resp = client.get(URL, query_string={"date": "2025-03-10"})

    body = resp.get_json()
    assert resp.status_code == 500
    assert body == {"error": "Database is unreachable or misconfigured", "hint": "Check DATABASE_URL."}
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
