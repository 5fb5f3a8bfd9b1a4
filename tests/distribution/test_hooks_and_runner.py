from __future__ import annotations

import logging
from datetime import datetime

from src.fleet_crm.fleet_crm.distribution.hooks import BestEffortRedistributionHook
from src.fleet_crm.fleet_crm.distribution.model import SweepReport
from src.fleet_crm.fleet_crm.distribution.runner import HourlySweepRunner, seconds_until_next_hour


class BrokenSweep:
    def __init__(self):
        self.calls = 0

    def check_and_redistribute_hourly(self):
        self.calls += 1
        raise ConnectionError("rpc unavailable")


class OkSweep:
    def __init__(self):
        self.calls = 0

    def check_and_redistribute_hourly(self):
        self.calls += 1
        return SweepReport(hour=10)


def test_hook_swallows_and_logs_sweep_errors(caplog):
    sweep = BrokenSweep()
    hook = BestEffortRedistributionHook(sweep)

    with caplog.at_level(logging.ERROR):
        hook.trigger(reason="sign-in", employee_id="E1")

    assert sweep.calls == 1
    assert "Redistribution hook failed after sign-in of E1" in caplog.text


def test_hook_runs_sweep():
    sweep = OkSweep()

    BestEffortRedistributionHook(sweep).trigger(reason="sign-out", employee_id="E1")

    assert sweep.calls == 1


def test_seconds_until_next_hour():
    assert seconds_until_next_hour(datetime(2026, 2, 2, 10, 59, 30)) == 30
    assert seconds_until_next_hour(datetime(2026, 2, 2, 23, 0, 0)) == 3600


def test_runner_run_once_does_not_raise():
    sweep = BrokenSweep()

    HourlySweepRunner(sweep).run_once()

    assert sweep.calls == 1


def test_runner_start_stop():
    runner = HourlySweepRunner(OkSweep())

    runner.start()
    assert runner.is_running
    runner.stop(timeout=2)
    assert not runner.is_running
