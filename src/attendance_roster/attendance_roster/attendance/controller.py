from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import read_json_body
from ..core.constants import EMPLOYEES_ROUTES
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def get_roster():
        view = container.attendance_service.get_roster(request.args.get("date"))
        return jsonify(view.to_dict())

    def mark_attendance():
        body = read_json_body()
        entry = container.attendance_service.mark_attendance(
            employee_id=body.get("id"),
            checked_in=body.get("checkedIn"),
            date_raw=body.get("date"),
        )
        return jsonify({"employee": entry.to_dict()})

    for rule in EMPLOYEES_ROUTES:
        app.add_url_rule(rule, endpoint="get_roster", view_func=get_roster, methods=["GET"])
        app.add_url_rule(rule, endpoint="mark_attendance", view_func=mark_attendance, methods=["PATCH"])
