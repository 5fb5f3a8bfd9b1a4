from __future__ import annotations

from datetime import datetime, time


def parse_clock_time(value: str) -> time:
    """Parse "HH:MM" or "HH:MM:SS" into a time."""
    parts = value.strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=hours, minute=minutes, second=seconds)


def minutes_late(now: datetime, scheduled: time) -> int:
    """Whole minutes elapsed since the scheduled time today, 0 when early."""
    scheduled_at = datetime.combine(now.date(), scheduled)
    elapsed = (now - scheduled_at).total_seconds()
    if elapsed <= 0:
        return 0
    return int(elapsed // 60)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
