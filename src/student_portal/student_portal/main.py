from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv
from flask import Flask
from flask_wtf import CSRFProtect

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .auth.guards import current_access_token
from .auth.controller import register as register_auth
from .cohorts.controller import register as register_cohorts
from .dashboard.controller import register as register_dashboard
from .attendance.controller import register as register_attendance
from .students.controller import register as register_students
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)

csrf = CSRFProtect()


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    supabase_config = getattr(settings, "SUPABASE_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["WTF_CSRF_ENABLED"] = bool(getattr(settings, "WTF_CSRF_ENABLED", True))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    logger.info(
        "settings=%s backend=%s",
        settings_module,
        urlparse(supabase_config.get("url") or "").netloc or "<unset>",
    )

    csrf.init_app(app)

    if container is None:
        container = build_container(supabase_config=supabase_config, token_provider=current_access_token)

    register_auth(app, container)
    register_cohorts(app, container)
    register_dashboard(app, container)
    register_attendance(app, container)
    register_students(app, container)
    register_reports(app, container)

    return app
