from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access checks."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Attendance status stored on the daily attendance record."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half_day"
    ON_LEAVE = "on_leave"


class AssignmentKind(str, Enum):
    """The two parallel realtime ledgers share one lifecycle."""

    TASK = "task"
    CLIENT = "client"
