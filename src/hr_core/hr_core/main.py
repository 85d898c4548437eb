from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import build_container
from .core.logging_config import setup_logging
from .database.bootstrap import load_fixtures
from .permissions.controller import register as register_permissions
from .timesheets.controller import register as register_timesheets
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("Starting hr-core with settings=%s", settings_module)

    container = build_container(max_report_days=int(getattr(settings, "MAX_REPORT_DAYS", 366)))
    if getattr(settings, "LOAD_FIXTURES", False):
        load_fixtures(container, validate=bool(getattr(settings, "VALIDATE_CATALOG", True)))
    app.extensions["hr_core.container"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_permissions(app, container)
    register_attendance(app, container)
    register_timesheets(app, container)

    return app
