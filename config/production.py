import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "fleet_crm"),
    "connection_timeout": int(os.getenv("DB_CONNECTION_TIMEOUT", "10")),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

DEFAULT_EXPECTED_SIGN_IN = os.getenv("DEFAULT_EXPECTED_SIGN_IN", "09:00")
LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "0"))
DISTRIBUTION_LOCK_TIMEOUT = float(os.getenv("DISTRIBUTION_LOCK_TIMEOUT", "10"))
HOURLY_SWEEP_ENABLED = bool(int(os.getenv("HOURLY_SWEEP_ENABLED", "1")))
