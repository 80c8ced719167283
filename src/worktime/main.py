from __future__ import annotations

import importlib
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .common.http import register_error_handlers
from .container import Container, build_container
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_admin_user, list_tables
from .database.connection import DBConfig
from .employees.controller import register as register_employees
from .reports.controller import register as register_reports
from .settings import get_settings_module
from .time_entries.controller import register as register_time_entries
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _bootstrap_database(settings, db_config: dict) -> None:
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config)
        password = getattr(settings, "ADMIN_PASSWORD", "")
        if password:
            ensure_admin_user(db_config, username=getattr(settings, "ADMIN_USERNAME", "admin"), password=password)
        else:
            logger.warning("ADMIN_PASSWORD is empty, no login account seeded")
        logger.info("Sample data ready")


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    """Application factory.

    Pass a prebuilt ``container`` (e.g. in-memory repositories in tests) to
    skip every database step.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = dict(getattr(settings, "DB_CONFIG"))
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_dict(db_config).describe())
        _bootstrap_database(settings, db_config)
        container = build_container(db_config=db_config)

    app.extensions["worktime.container"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_employees(app, container)
    register_time_entries(app, container)
    register_reports(app, container)
    register_dashboard(app, container)

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
