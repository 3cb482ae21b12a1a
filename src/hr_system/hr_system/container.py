from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.service import LeaveService
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.service import PayrollService
from .settings.mysql_holiday_repository import MySQLHolidayRepository
from .settings.mysql_list_repository import MySQLOrganizationListRepository
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.service import SettingsService
from .system_logs.mysql_system_log_repository import MySQLSystemLogRepository
from .system_logs.service import SystemLogService
from .workdays.service import WorkCalendarService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    holidays_repo: MySQLHolidayRepository
    settings_repo: MySQLSettingsRepository
    lists_repo: MySQLOrganizationListRepository
    leaves_repo: MySQLLeaveRepository
    payrolls_repo: MySQLPayrollRepository
    system_logs_repo: MySQLSystemLogRepository

    work_calendar_service: WorkCalendarService
    settings_service: SettingsService
    leave_service: LeaveService
    payroll_service: PayrollService
    system_log_service: SystemLogService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    settings_repo = MySQLSettingsRepository(conn)
    lists_repo = MySQLOrganizationListRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    payrolls_repo = MySQLPayrollRepository(conn)
    system_logs_repo = MySQLSystemLogRepository(conn)

    work_calendar_service = WorkCalendarService(settings_repo, holidays_repo)
    settings_service = SettingsService(holidays_repo, settings_repo, lists_repo, system_logs=system_logs_repo)
    leave_service = LeaveService(leaves_repo, employees_repo, work_calendar_service, system_logs=system_logs_repo)
    payroll_service = PayrollService(
        payrolls_repo,
        attendance_repo,
        leaves_repo,
        employees_repo,
        settings_repo,
        work_calendar_service,
        system_logs=system_logs_repo,
    )
    system_log_service = SystemLogService(system_logs_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        holidays_repo=holidays_repo,
        settings_repo=settings_repo,
        lists_repo=lists_repo,
        leaves_repo=leaves_repo,
        payrolls_repo=payrolls_repo,
        system_logs_repo=system_logs_repo,
        work_calendar_service=work_calendar_service,
        settings_service=settings_service,
        leave_service=leave_service,
        payroll_service=payroll_service,
        system_log_service=system_log_service,
    )
