"""Run one redistribution sweep for the current hour (cron or operator use)."""
from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.fleet_crm.fleet_crm.container import build_container
from src.fleet_crm.fleet_crm.main import configure_logging


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        lock_timeout=float(getattr(settings, "DISTRIBUTION_LOCK_TIMEOUT", 10)),
    )
    report = container.hourly_sweep.manual_redistribute()
    print(report.message)
    return 0 if report.success else 1


if __name__ == "__main__":
    sys.exit(main())
