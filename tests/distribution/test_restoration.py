from __future__ import annotations

from src.fleet_crm.fleet_crm.core.enums import AssignmentKind

TASK = AssignmentKind.TASK
CLIENT = AssignmentKind.CLIENT


def _seed_e1(schedules, ledger):
    for task_id in ("T1", "T2"):
        schedules.add(hour_start=9, hour_end=17, task_id=task_id, assigned_to="E1")
    schedules.add(hour_start=9, hour_end=17, client_id="C1", assigned_to="E1")
    return [
        ledger.insert(TASK, entity_id="T1", employee_id="E1", hour_slot=10, is_temporary=False),
        ledger.insert(TASK, entity_id="T2", employee_id="E1", hour_slot=10, is_temporary=False),
        ledger.insert(CLIENT, entity_id="C1", employee_id="E1", hour_slot=10, is_temporary=False),
    ]


def test_redistribute_then_restore_round_trip(schedules, statuses, ledger, tasks, redistribution, restoration, today):
    originals = _seed_e1(schedules, ledger)
    statuses.set("E2", today)
    statuses.set("E3", today)

    redistribution.redistribute_on_absence("E1")

    assert {ledger.owner(TASK, "T1", 10), ledger.owner(TASK, "T2", 10)} == {"E2", "E3"}
    assert ledger.owner(CLIENT, "C1", 10) == "E2"
    assert all(ledger.get(r.assignment_id).is_active is False for r in originals)
    temporary = [r for r in ledger.rows if r.is_temporary]
    assert len(temporary) == 3

    result = restoration.restore_on_late_sign_in("E1")

    assert result.success
    assert (result.restored_task_count, result.restored_client_count) == (2, 1)
    assert ledger.owner(TASK, "T1", 10) == "E1"
    assert ledger.owner(TASK, "T2", 10) == "E1"
    assert ledger.owner(CLIENT, "C1", 10) == "E1"
    assert all(ledger.get(r.assignment_id).is_active is False for r in temporary)
    assert tasks.assigned_to == {"T1": "E1", "T2": "E1"}
    assert all(r.is_temporary is False for r in ledger.list_active(TASK) + ledger.list_active(CLIENT))


def test_ownership_stays_exclusive_across_redistribute_restore_redistribute(
    schedules, statuses, ledger, redistribution, restoration, today
):
    _seed_e1(schedules, ledger)
    statuses.set("E2", today)
    statuses.set("E3", today)

    for step in (
        lambda: redistribution.redistribute_on_absence("E1"),
        lambda: restoration.restore_on_late_sign_in("E1"),
        lambda: redistribution.redistribute_on_absence("E1"),
        lambda: restoration.restore_on_late_sign_in("E1"),
    ):
        step()
        assert max(ledger.live_counts().values()) == 1


def test_restore_leaves_other_absences_alone(schedules, statuses, ledger, redistribution, restoration, today):
    _seed_e1(schedules, ledger)
    schedules.add(hour_start=10, hour_end=12, task_id="T9", assigned_to="E4")
    statuses.set("E2", today)

    redistribution.redistribute_on_absence("E1")
    redistribution.redistribute_on_absence("E4")
    restoration.restore_on_late_sign_in("E1")

    live_for_e4 = [r for r in ledger.list_active(TASK) if r.reassigned_from == "E4"]
    assert [(r.entity_id, r.employee_id) for r in live_for_e4] == [("T9", "E2")]


def test_restore_without_schedule_still_revokes_temporary_rows(schedules, statuses, ledger, restoration):
    temp = ledger.insert(TASK, entity_id="T1", employee_id="E2", hour_slot=9, is_temporary=True, reassigned_from="E1")

    result = restoration.restore_on_late_sign_in("E1")

    assert result.success
    assert result.message
    assert (result.restored_task_count, result.restored_client_count) == (0, 0)
    assert ledger.get(temp.assignment_id).is_active is False


def test_on_time_restore_reasserts_schedule(schedules, ledger, tasks, restoration):
    schedules.add(hour_start=10, hour_end=10, task_id="T1", assigned_to="E1")
    stale = ledger.insert(TASK, entity_id="T1", employee_id="E5", hour_slot=10, is_temporary=False)

    restoration.restore_on_late_sign_in("E1")

    assert ledger.owner(TASK, "T1", 10) == "E1"
    assert ledger.get(stale.assignment_id).is_active is False
    assert tasks.assigned_to["T1"] == "E1"


def test_task_in_overlapping_windows_is_restored_once(schedules, statuses, ledger, tasks, redistribution, restoration, today):
    schedules.add(hour_start=9, hour_end=17, task_id="T1", assigned_to="E1")
    schedules.add(hour_start=10, hour_end=12, task_id="T1", assigned_to="E1")
    statuses.set("E2", today)
    redistribution.redistribute_on_absence("E1")
    writes_before = tasks.writes

    result = restoration.restore_on_late_sign_in("E1")

    assert result.restored_task_count == 1
    assert tasks.writes - writes_before == 1
    assert [r.employee_id for r in ledger.list_active(TASK, hour_slot=10)] == ["E1"]
