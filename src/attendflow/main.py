from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .api.attendance import register as register_attendance
from .api.employees import register as register_employees
from .api.errors import register as register_errors
from .api.locations import register as register_locations
from .api.reports import register as register_reports
from .container import build_container
from .settings import get_settings_module

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
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    container = build_container(
        seed_demo=bool(getattr(settings, "AUTO_SEED_DEMO", False)),
        geofence_method=getattr(settings, "GEOFENCE_METHOD", "flat"),
        gemini_api_key=getattr(settings, "GEMINI_API_KEY", None),
        insights_model=getattr(settings, "INSIGHTS_MODEL", "gemini-3-flash-preview"),
        insights_timeout=float(getattr(settings, "INSIGHTS_TIMEOUT_SECONDS", 20)),
    )
    app.extensions["attendflow"] = container

    logger.info(
        "attendflow started settings=%s locations=%d employees=%d",
        settings_module,
        len(container.ledger.list_locations()),
        len(container.ledger.list_employees()),
    )

    register_errors(app)
    register_locations(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
