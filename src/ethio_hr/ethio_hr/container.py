from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from .attendance.factory import DayStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.reconciler import AttendanceReconciler
from .attendance.reconciliation_service import ReconciliationService
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_SITE_RADIUS_METERS, DEFAULT_WORKDAY_END
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .ethiopian_calendar.service import CalendarService
from .geofence.mysql_work_site_repository import MySQLWorkSiteRepository
from .geofence.repository import WorkSiteRepository
from .geofence.service import GeofenceService
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .leave.repository import LeaveRepository
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    leaves_repo: LeaveRepository
    work_sites_repo: WorkSiteRepository

    calendar_service: CalendarService
    geofence_service: GeofenceService
    attendance_service: AttendanceService
    reconciliation_service: ReconciliationService
    payroll_service: PayrollService


def wire_container(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    leaves_repo: LeaveRepository,
    work_sites_repo: WorkSiteRepository,
    calendar_service: CalendarService | None = None,
    workday_end: time = DEFAULT_WORKDAY_END,
) -> Container:
    """Build the services on top of any repository implementations."""

    calendar_service = calendar_service or CalendarService()
    geofence_service = GeofenceService(work_sites_repo)
    attendance_service = AttendanceService(attendance_repo, employees_repo, geofence_service)
    reconciler = AttendanceReconciler(
        calendar_service,
        strategy_factory=DayStrategyFactory(),
        workday_end=workday_end,
    )
    reconciliation_service = ReconciliationService(attendance_repo, leaves_repo, employees_repo, reconciler)
    payroll_service = PayrollService(employees_repo, attendance_repo, leaves_repo, calendar_service)

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        work_sites_repo=work_sites_repo,
        calendar_service=calendar_service,
        geofence_service=geofence_service,
        attendance_service=attendance_service,
        reconciliation_service=reconciliation_service,
        payroll_service=payroll_service,
    )


def build_container(
    *,
    db_config: dict,
    workday_end: time = DEFAULT_WORKDAY_END,
    default_site_radius_meters: float = DEFAULT_SITE_RADIUS_METERS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return wire_container(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        work_sites_repo=MySQLWorkSiteRepository(conn, default_radius_meters=default_site_radius_meters),
        workday_end=workday_end,
    )
