from __future__ import annotations

from collections import Counter
from datetime import timedelta

import pytest

from src.fleet_crm.fleet_crm.core.enums import AssignmentKind
from src.fleet_crm.fleet_crm.distribution.redistribution import round_robin

TASK = AssignmentKind.TASK
CLIENT = AssignmentKind.CLIENT


def test_absent_employee_task_goes_to_first_active_employee(schedules, statuses, ledger, tasks, redistribution, today):
    # Schedule 09-17, T1 -> E1; at 10:xx E1 is absent while E2 and E3 are signed in.
    schedules.add(hour_start=9, hour_end=17, task_id="T1", assigned_to="E1")
    original = ledger.insert(TASK, entity_id="T1", employee_id="E1", hour_slot=10, is_temporary=False)
    statuses.set("E2", today)
    statuses.set("E3", today)

    result = redistribution.redistribute_on_absence("E1")

    assert result.success
    assert result.redistributed_task_count == 1
    assert result.target_count == 2
    assert ledger.owner(TASK, "T1", 10) == "E2"
    assert ledger.get(original.assignment_id).is_active is False
    assert tasks.assigned_to["T1"] == "E2"

    new_row = ledger.list_active(TASK, employee_id="E2")[0]
    assert new_row.is_temporary is True
    assert new_row.reassigned_from == "E1"


@pytest.mark.parametrize("task_count,employee_count", [(7, 3), (2, 5), (9, 3), (10, 4)])
def test_round_robin_spread_is_within_one(schedules, statuses, ledger, redistribution, today, task_count, employee_count):
    for i in range(task_count):
        schedules.add(hour_start=8, hour_end=12, task_id=f"T{i}", assigned_to="ABSENT")
    active = [f"E{i}" for i in range(employee_count)]
    for employee_id in active:
        statuses.set(employee_id, today)

    redistribution.redistribute_on_absence("ABSENT")

    per_employee = Counter(r.employee_id for r in ledger.list_active(TASK, hour_slot=10))
    low, high = task_count // employee_count, -(-task_count // employee_count)
    for employee_id in active:
        assert per_employee.get(employee_id, 0) in {low, high}
    assert sum(per_employee.values()) == task_count


def test_task_and_client_lists_each_restart_at_first_employee(schedules, statuses, ledger, redistribution, today):
    schedules.add(hour_start=10, hour_end=10, task_id="T1", assigned_to="E1")
    schedules.add(hour_start=10, hour_end=10, client_id="C1", assigned_to="E1")
    statuses.set("E2", today)
    statuses.set("E3", today)

    result = redistribution.redistribute_on_absence("E1")

    assert (result.redistributed_task_count, result.redistributed_client_count) == (1, 1)
    assert ledger.owner(TASK, "T1", 10) == "E2"
    assert ledger.owner(CLIENT, "C1", 10) == "E2"


def test_clients_do_not_touch_canonical_task_owner(schedules, statuses, tasks, redistribution, today):
    schedules.add(hour_start=9, hour_end=11, client_id="C1", assigned_to="E1")
    statuses.set("E2", today)

    redistribution.redistribute_on_absence("E1")

    assert tasks.assigned_to == {}


def test_no_current_hour_schedule_is_a_noop_without_writes(schedules, statuses, ledger, tasks, redistribution, today):
    schedules.add(hour_start=14, hour_end=16, task_id="T1", assigned_to="E1")
    statuses.set("E2", today)

    result = redistribution.redistribute_on_absence("E1")

    assert result.success
    assert result.message
    assert (result.redistributed_task_count, result.redistributed_client_count, result.target_count) == (0, 0, 0)
    assert ledger.writes == 0
    assert tasks.writes == 0


def test_empty_active_pool_fails_without_new_rows(schedules, statuses, ledger, redistribution, today):
    schedules.add(hour_start=9, hour_end=17, task_id="T1", assigned_to="E1")
    own = ledger.insert(TASK, entity_id="T1", employee_id="E1", hour_slot=10, is_temporary=False)
    statuses.set("E2", today, signed_in=False)
    inserts_before = ledger.inserts

    result = redistribution.redistribute_on_absence("E1")

    assert result.success is False
    assert result.message
    assert ledger.inserts == inserts_before
    assert ledger.get(own.assignment_id).is_active is False
    assert ledger.list_active(TASK) == []


def test_signed_in_yesterday_does_not_count_as_active(schedules, statuses, ledger, redistribution, fixed_now):
    schedules.add(hour_start=9, hour_end=17, task_id="T1", assigned_to="E1")
    statuses.set("E2", fixed_now.date() - timedelta(days=1))

    result = redistribution.redistribute_on_absence("E1")

    assert result.success is False


def test_repeat_redistribution_converges_to_same_owners(schedules, statuses, ledger, redistribution, today):
    for task_id in ("T1", "T2", "T3"):
        schedules.add(hour_start=9, hour_end=17, task_id=task_id, assigned_to="E1")
    statuses.set("E2", today)
    statuses.set("E3", today)

    redistribution.redistribute_on_absence("E1")
    first = {t: ledger.owner(TASK, t, 10) for t in ("T1", "T2", "T3")}
    redistribution.redistribute_on_absence("E1")
    second = {t: ledger.owner(TASK, t, 10) for t in ("T1", "T2", "T3")}

    assert first == second == {"T1": "E2", "T2": "E3", "T3": "E2"}
    assert max(ledger.live_counts().values()) == 1


def test_windows_are_inclusive_on_both_ends(schedules, statuses, ledger, redistribution, clock, today):
    schedules.add(hour_start=10, hour_end=10, task_id="T1", assigned_to="E1")
    statuses.set("E2", today)

    clock.set(clock.now().replace(hour=10, minute=59))
    assert redistribution.redistribute_on_absence("E1").redistributed_task_count == 1

    clock.set(clock.now().replace(hour=11, minute=0))
    assert redistribution.redistribute_on_absence("E1").redistributed_task_count == 0


def test_round_robin_without_targets_is_empty():
    assert round_robin(["T1", "T2"], []) == []
    assert round_robin(["T1", "T2", "T3"], ["A", "B"]) == [("T1", "A"), ("T2", "B"), ("T3", "A")]


def test_task_in_overlapping_windows_is_dealt_once(schedules, statuses, ledger, tasks, redistribution, today):
    schedules.add(hour_start=9, hour_end=17, task_id="T1", assigned_to="E1")
    schedules.add(hour_start=10, hour_end=12, task_id="T1", assigned_to="E1")
    schedules.add(hour_start=9, hour_end=17, task_id="T2", assigned_to="E1")
    statuses.set("E2", today)
    statuses.set("E3", today)

    result = redistribution.redistribute_on_absence("E1")

    assert result.redistributed_task_count == 2
    assert ledger.owner(TASK, "T1", 10) == "E2"
    assert ledger.owner(TASK, "T2", 10) == "E3"
    assert tasks.writes == 2
    assert len(ledger.list_active(TASK, hour_slot=10)) == 2
