from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.mysql_signin_status_repository import MySQLSignInStatusRepository
from .attendance.service import AttendanceService
from .common.clock import Clock, SystemClock
from .core.constants import DEFAULT_EXPECTED_SIGN_IN, DEFAULT_LATE_GRACE_MINUTES, DEFAULT_LOCK_TIMEOUT_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .database.locks import MySQLAdvisoryLockProvider
from .distribution.hooks import BestEffortRedistributionHook
from .distribution.mysql_assignment_ledger import MySQLAssignmentLedger
from .distribution.redistribution import RedistributionEngine
from .distribution.restoration import RestorationEngine
from .distribution.runner import HourlySweepRunner
from .distribution.summary import SummaryReporter
from .distribution.sweep import HourlySweep
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.service import ScheduleService
from .tasks.mysql_task_repository import MySQLTaskRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    clock: Clock

    employees_repo: MySQLEmployeeRepository
    tasks_repo: MySQLTaskRepository
    schedules_repo: MySQLScheduleRepository
    attendance_repo: MySQLAttendanceRepository
    statuses_repo: MySQLSignInStatusRepository
    ledger: MySQLAssignmentLedger
    locks: MySQLAdvisoryLockProvider

    schedule_service: ScheduleService
    redistribution_engine: RedistributionEngine
    restoration_engine: RestorationEngine
    hourly_sweep: HourlySweep
    summary_reporter: SummaryReporter
    attendance_service: AttendanceService
    sweep_runner: HourlySweepRunner


def build_container(
    *,
    db_config: dict,
    clock: Clock | None = None,
    lock_timeout: float = DEFAULT_LOCK_TIMEOUT_SECONDS,
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
    default_expected_sign_in: str = DEFAULT_EXPECTED_SIGN_IN,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_settings(db_config))
    clock = clock or SystemClock()

    employees_repo = MySQLEmployeeRepository(conn)
    tasks_repo = MySQLTaskRepository(conn)
    schedules_repo = MySQLScheduleRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    statuses_repo = MySQLSignInStatusRepository(conn)
    ledger = MySQLAssignmentLedger(conn)
    locks = MySQLAdvisoryLockProvider(conn)

    schedule_service = ScheduleService(schedules_repo, clock=clock)
    redistribution_engine = RedistributionEngine(
        schedules_repo,
        statuses_repo,
        ledger,
        tasks_repo,
        locks,
        clock=clock,
        lock_timeout=lock_timeout,
    )
    restoration_engine = RestorationEngine(
        schedules_repo,
        ledger,
        tasks_repo,
        locks,
        clock=clock,
        lock_timeout=lock_timeout,
    )
    hourly_sweep = HourlySweep(schedules_repo, statuses_repo, redistribution_engine, clock=clock)
    summary_reporter = SummaryReporter(schedules_repo, statuses_repo, ledger, employees_repo, clock=clock)
    attendance_service = AttendanceService(
        attendance_repo,
        statuses_repo,
        employees_repo,
        restoration_engine,
        BestEffortRedistributionHook(hourly_sweep),
        clock=clock,
        strategy_factory=AttendanceStrategyFactory(),
        grace_minutes=grace_minutes,
        default_expected_sign_in=default_expected_sign_in,
    )
    sweep_runner = HourlySweepRunner(hourly_sweep, clock=clock)

    return Container(
        conn=conn,
        clock=clock,
        employees_repo=employees_repo,
        tasks_repo=tasks_repo,
        schedules_repo=schedules_repo,
        attendance_repo=attendance_repo,
        statuses_repo=statuses_repo,
        ledger=ledger,
        locks=locks,
        schedule_service=schedule_service,
        redistribution_engine=redistribution_engine,
        restoration_engine=restoration_engine,
        hourly_sweep=hourly_sweep,
        summary_reporter=summary_reporter,
        attendance_service=attendance_service,
        sweep_runner=sweep_runner,
    )
