from __future__ import annotations

from datetime import datetime

import pytest

from src.fleet_crm.fleet_crm.common.clock import FixedClock
from src.fleet_crm.fleet_crm.common.locks import InProcessLockProvider
from src.fleet_crm.fleet_crm.distribution.redistribution import RedistributionEngine
from src.fleet_crm.fleet_crm.distribution.restoration import RestorationEngine
from src.fleet_crm.fleet_crm.distribution.sweep import HourlySweep
from tests.fakes import InMemoryLedger, InMemorySchedules, InMemoryStatuses, InMemoryTasks


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 10, 20, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def today(fixed_now):
    return fixed_now.date()


@pytest.fixture
def schedules() -> InMemorySchedules:
    return InMemorySchedules()


@pytest.fixture
def statuses() -> InMemoryStatuses:
    return InMemoryStatuses()


@pytest.fixture
def ledger() -> InMemoryLedger:
    return InMemoryLedger()


@pytest.fixture
def tasks() -> InMemoryTasks:
    return InMemoryTasks()


@pytest.fixture
def locks() -> InProcessLockProvider:
    return InProcessLockProvider()


@pytest.fixture
def redistribution(schedules, statuses, ledger, tasks, locks, clock) -> RedistributionEngine:
    return RedistributionEngine(schedules, statuses, ledger, tasks, locks, clock=clock, lock_timeout=0.1)


@pytest.fixture
def restoration(schedules, ledger, tasks, locks, clock) -> RestorationEngine:
    return RestorationEngine(schedules, ledger, tasks, locks, clock=clock, lock_timeout=0.1)


@pytest.fixture
def sweep(schedules, statuses, redistribution, clock) -> HourlySweep:
    return HourlySweep(schedules, statuses, redistribution, clock=clock)
