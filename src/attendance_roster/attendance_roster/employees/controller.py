from __future__ import annotations

from collections.abc import Mapping

from flask import Flask, jsonify, request

from ..common.http import read_json_body
from ..core.constants import EMPLOYEES_ROUTES
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def create_or_reconcile():
        body = read_json_body()

        if "employee" in body:
            employee = body["employee"]
            if not isinstance(employee, Mapping):
                raise ValidationError("employee must be an object")
            entry = container.employee_service.create_employee(
                name=employee.get("name"),
                position=employee.get("position"),
                department=employee.get("department"),
            )
            return jsonify({"employee": entry.to_dict()}), 201

        incoming = body.get("employees", [])
        if not isinstance(incoming, list):
            raise ValidationError("employees must be a list")
        outcome = container.employee_service.reconcile_batch(incoming)
        return jsonify(outcome.to_dict())

    def delete_employee_or_date():
        """Delete one employee when `employeeId` is given, else clear a whole date."""
        body = read_json_body()
        employee_id = request.args.get("employeeId") or body.get("employeeId")
        date_raw = request.args.get("date") or body.get("date")
        date_raw = str(date_raw).strip() if date_raw is not None else None

        if employee_id:
            outcome = container.employee_service.delete_employee(str(employee_id), date_raw=date_raw)
            return jsonify(outcome.to_dict())

        result = container.attendance_service.clear_date(date_raw)
        return jsonify(result.to_dict())

    for rule in EMPLOYEES_ROUTES:
        app.add_url_rule(rule, endpoint="create_or_reconcile", view_func=create_or_reconcile, methods=["POST"])
        app.add_url_rule(rule, endpoint="delete_employee_or_date", view_func=delete_employee_or_date, methods=["DELETE"])
