"""Cross-cutting HTTP concerns: JSON errors, CORS headers, health/debug probes."""
from __future__ import annotations

import logging
import os
import re
from typing import Any, Dict

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.constants import CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS, EMPLOYEES_ROUTES
from ..core.exceptions import ConfigurationError, DomainError, ValidationError
from ..database.url import looks_like_mysql, redact_secrets, redact_url

logger = logging.getLogger(__name__)

_DB_ENV_KEY_RE = re.compile(r"(DATABASE_URL|MYSQL_URL|JAWSDB_URL|^DB_)", re.IGNORECASE)


def read_json_body() -> Dict[str, Any]:
    """Request body as a JSON object; an empty body reads as {}."""
    if not request.get_data(cache=True).strip():
        return {}
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a valid JSON object")
    return payload


def register(app: Flask) -> None:
    @app.errorhandler(ConfigurationError)
    def handle_configuration_error(e: ConfigurationError):
        logger.error("configuration error: %s", e)
        return jsonify({"error": str(e), "hint": e.hint}), e.status_code

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"error": str(e)}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        logger.exception("unexpected error on %s %s", request.method, request.path)
        return (
            jsonify(
                {
                    "error": "Internal server error",
                    "detail": redact_secrets(str(e)),
                    "code": getattr(e, "errno", None),
                }
            ),
            500,
        )

    @app.before_request
    def probes():
        if request.path not in EMPLOYEES_ROUTES:
            return None

        if request.args.get("health") == "1":
            return jsonify({"ok": True})

        if request.args.get("debug") == "1":
            if not app.config.get("DEBUG"):
                return jsonify({"error": "Not found"}), 404
            raw = app.config.get("DATABASE_URL") or ""
            return jsonify(
                {
                    "method": request.method,
                    "dbUrlResolved": redact_url(raw),
                    "validUrl": looks_like_mysql(raw),
                    "envKeysPresent": sorted(k for k in os.environ if _DB_ENV_KEY_RE.search(k)),
                }
            )
        return None

    @app.after_request
    def cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = app.config.get("CORS_ALLOW_ORIGIN", "*")
        response.headers["Access-Control-Allow-Headers"] = CORS_ALLOW_HEADERS
        response.headers["Access-Control-Allow-Methods"] = CORS_ALLOW_METHODS
        return response
