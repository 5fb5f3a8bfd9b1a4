"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

FIRST_HOUR = 0
LAST_HOUR = 23

DEFAULT_EXPECTED_SIGN_IN = "09:00"
DEFAULT_LATE_GRACE_MINUTES = 0
DEFAULT_LOCK_TIMEOUT_SECONDS = 10

DISTRIBUTION_LOCK_PREFIX = "distribution"
