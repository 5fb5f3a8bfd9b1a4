"""Create the database if needed and apply database/schema.sql.

Exits non-zero when a table the distribution engine depends on is missing
afterwards.
"""
from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.fleet_crm.fleet_crm.database.bootstrap import apply_schema, list_tables
from src.fleet_crm.fleet_crm.main import configure_logging

REQUIRED_TABLES = (
    "distribution_schedule",
    "employee_signin_status",
    "task_assignments_realtime",
    "client_assignments_realtime",
)


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    tables = set(list_tables(db_config))
    missing = [t for t in REQUIRED_TABLES if t not in tables]

    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    if missing:
        print(f"FAILED: {target} is missing {', '.join(missing)}")
        return 1
    print(f"OK: schema applied to {target} (tables={len(tables)})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
