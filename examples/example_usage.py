"""Example: drive the distribution services directly (no Flask).

Controllers are a thin layer; the behavior lives in the services and engines.
"""

import importlib

from config import get_settings_module

from src.fleet_crm.fleet_crm.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    for row in container.summary_reporter.get_distribution_summary():
        print(row.to_dict())


if __name__ == "__main__":
    main()
