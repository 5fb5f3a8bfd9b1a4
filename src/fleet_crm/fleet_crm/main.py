from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .distribution.controller import register as register_distribution
from .schedules.controller import register as register_schedules

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

    container = build_container(
        db_config=db_config,
        lock_timeout=float(getattr(settings, "DISTRIBUTION_LOCK_TIMEOUT", 10)),
        grace_minutes=int(getattr(settings, "LATE_GRACE_MINUTES", 0)),
        default_expected_sign_in=str(getattr(settings, "DEFAULT_EXPECTED_SIGN_IN", "09:00")),
    )
    app.extensions["fleet_crm"] = container

    register_schedules(app, container)
    register_distribution(app, container)
    register_attendance(app, container)

    if bool(getattr(settings, "HOURLY_SWEEP_ENABLED", False)):
        container.sweep_runner.start()

    return app
