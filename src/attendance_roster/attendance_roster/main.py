from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register as register_http
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.url import effective_db_config
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)


def create_app(*, container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    Schema setup runs here, once per process, before the first request. Pass
    a prebuilt `container` (tests) to skip every database step.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DATABASE_URL"] = getattr(settings, "DATABASE_URL", "")
    app.config["CORS_ALLOW_ORIGIN"] = getattr(settings, "CORS_ALLOW_ORIGIN", "*")

    if container is None:
        db_config = effective_db_config(getattr(settings, "DB_CONFIG"), app.config["DATABASE_URL"])
        logger.info("settings=%s db=%s", settings_module, db_config.describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config)

        container = build_container(db_config=db_config)

    register_http(app)
    register_attendance(app, container)
    register_employees(app, container)

    return app
