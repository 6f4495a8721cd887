from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .payroll.controller import register as register_payroll
from .payroll.demo_roster import load_demo_roster

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    if app.config["DEBUG"]:
        logger.info("[boxing-payroll] settings=%s", settings_module)

    container = build_container(
        strict_validation=bool(getattr(settings, "STRICT_VALIDATION", False)),
        unique_ids=bool(getattr(settings, "UNIQUE_STAFF_IDS", True)),
    )

    if bool(getattr(settings, "AUTO_SEED_ROSTER", False)):
        count = load_demo_roster(container.payroll_service)
        if app.config["DEBUG"]:
            logger.info("[boxing-payroll] demo roster ready (staff=%s)", count)

    app.extensions["boxing_payroll"] = container
    register_payroll(app, container)

    return app
