from __future__ import annotations

from src.fleet_crm.fleet_crm.core.enums import AssignmentKind
from src.fleet_crm.fleet_crm.distribution.model import RedistributionResult
from src.fleet_crm.fleet_crm.distribution.sweep import HourlySweep


class SpyRedistribution:
    def __init__(self, *, failing=(), unassigned=()):
        self.calls: list[str] = []
        self._failing = set(failing)
        self._unassigned = set(unassigned)

    def redistribute_on_absence(self, employee_id):
        self.calls.append(employee_id)
        if employee_id in self._failing:
            raise ConnectionError("datastore unavailable")
        if employee_id in self._unassigned:
            return RedistributionResult(success=False, message="No active employees to redistribute to")
        return RedistributionResult(success=True, message="ok", redistributed_task_count=1, target_count=1)


def test_sweep_redistributes_each_absent_employee_once(schedules, statuses, clock, today):
    schedules.add(hour_start=9, hour_end=12, task_id="T1", assigned_to="E1")
    schedules.add(hour_start=10, hour_end=10, task_id="T2", assigned_to="E1")
    schedules.add(hour_start=8, hour_end=17, client_id="C1", assigned_to="E1")
    schedules.add(hour_start=9, hour_end=17, task_id="T3", assigned_to="E2")
    schedules.add(hour_start=10, hour_end=11, task_id="T4", assigned_to="E3")
    schedules.add(hour_start=15, hour_end=17, task_id="T5", assigned_to="E4")
    statuses.set("E2", today)
    statuses.set("E3", today, signed_in=False)
    spy = SpyRedistribution()

    report = HourlySweep(schedules, statuses, spy, clock=clock).check_and_redistribute_hourly()

    assert spy.calls == ["E1", "E3"]
    assert report.checked == ["E1", "E2", "E3"]
    assert report.redistributed == ["E1", "E3"]
    assert report.success


def test_sweep_continues_after_a_failing_employee(schedules, statuses, clock):
    schedules.add(hour_start=9, hour_end=12, task_id="T1", assigned_to="E1")
    schedules.add(hour_start=9, hour_end=12, task_id="T2", assigned_to="E2")
    schedules.add(hour_start=9, hour_end=12, task_id="T3", assigned_to="E3")
    spy = SpyRedistribution(failing={"E1"}, unassigned={"E2"})

    report = HourlySweep(schedules, statuses, spy, clock=clock).check_and_redistribute_hourly()

    assert spy.calls == ["E1", "E2", "E3"]
    assert report.failed == ["E1"]
    assert report.unassigned == ["E2"]
    assert report.redistributed == ["E3"]
    assert report.success is False
    assert "1 failed" in report.message


def test_sweep_with_real_engine_moves_work_to_signed_in_peer(schedules, statuses, ledger, sweep, today):
    schedules.add(hour_start=9, hour_end=17, task_id="T1", assigned_to="E1")
    schedules.add(hour_start=9, hour_end=17, task_id="T2", assigned_to="E2")
    statuses.set("E2", today)

    report = sweep.check_and_redistribute_hourly()

    assert report.redistributed == ["E1"]
    assert [(r.entity_id, r.employee_id) for r in ledger.list_active(AssignmentKind.TASK)] == [("T1", "E2")]


def test_manual_redistribute_runs_a_full_pass(schedules, statuses, clock):
    schedules.add(hour_start=10, hour_end=10, task_id="T1", assigned_to="E1")
    spy = SpyRedistribution()

    report = HourlySweep(schedules, statuses, spy, clock=clock).manual_redistribute()

    assert spy.calls == ["E1"]
    assert report.to_dict()["success"] is True
    assert report.hour == 10


def test_sweep_outside_any_window_does_nothing(schedules, statuses, clock):
    schedules.add(hour_start=14, hour_end=16, task_id="T1", assigned_to="E1")
    spy = SpyRedistribution()

    report = HourlySweep(schedules, statuses, spy, clock=clock).check_and_redistribute_hourly()

    assert spy.calls == []
    assert report.checked == []
