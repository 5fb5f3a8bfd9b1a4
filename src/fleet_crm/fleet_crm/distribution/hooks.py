from __future__ import annotations

import logging

from .sweep import HourlySweep

logger = logging.getLogger(__name__)


class BestEffortRedistributionHook:
    """Re-run the sweep after an attendance write.

    Failures are logged and dropped: recording attendance never depends on
    the distribution machinery being available.
    """

    def __init__(self, sweep: HourlySweep):
        self._sweep = sweep

    def trigger(self, *, reason: str, employee_id: str) -> None:
        try:
            report = self._sweep.check_and_redistribute_hourly()
        except Exception:
            logger.exception("Redistribution hook failed after %s of %s", reason, employee_id)
            return
        logger.info("Redistribution hook after %s of %s: %s", reason, employee_id, report.message)
