import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "fleet_crm_test"),
    "connection_timeout": 5,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

DEFAULT_EXPECTED_SIGN_IN = "09:00"
LATE_GRACE_MINUTES = 0
DISTRIBUTION_LOCK_TIMEOUT = 2.0
HOURLY_SWEEP_ENABLED = False
