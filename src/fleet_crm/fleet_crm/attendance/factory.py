from __future__ import annotations

from dataclasses import dataclass

from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_sign_in(self, *, late_minutes: int, grace_minutes: int = 0) -> AttendanceStrategy:
        if late_minutes > max(0, int(grace_minutes)):
            return LateStrategy()
        return PresentStrategy()
