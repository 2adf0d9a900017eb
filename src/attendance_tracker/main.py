from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .container import Container, build_container_from_settings
from .core.exceptions import PersistenceError
from .logging_config import setup_logging
from .settings import get_settings_module

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), json_format=bool(getattr(settings, "LOG_JSON", False)))
    logger.info(
        "Starting attendance tracker (settings=%s, storage=%s)",
        settings_module,
        getattr(settings, "STORAGE_BACKEND", "json"),
    )

    if container is None:
        container = build_container_from_settings(settings)

    try:
        container.attendance_store.initialize()
    except PersistenceError:
        # Already logged by the store; the app starts with an empty profile.
        app.config["STARTUP_LOAD_FAILED"] = True
    else:
        app.config["STARTUP_LOAD_FAILED"] = False

    register_attendance(app, container)
    return app
