from __future__ import annotations

import calendar
import logging
import re
from datetime import MAXYEAR, MINYEAR
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.audit import Actor, log_system_event
from ..common.datetime_utils import month_key, parse_month_year
from ..common.validators import parse_non_negative_number, require_non_empty
from ..core.constants import DEFAULT_STANDARD_HOURS
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, StorageError, ValidationError
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from ..settings.repository import SettingsRepository
from ..settings.service import standard_hours_from_setting
from ..system_logs.repository import SystemLogRepository
from ..workdays.accumulator import LeaveInterval, accumulate_leave_days
from ..workdays.counter import count_working_days
from ..workdays.model import DateRange, WorkingDayCount
from ..workdays.service import WorkCalendarService
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator, round_money
from .model import (
    AnnualReport,
    AnnualReportRow,
    MonthlyPayrollSummary,
    MonthlySalary,
    PayrollSaveResult,
    PayrollValues,
)
from .repository import PayrollRepository

logger = logging.getLogger(__name__)

_MONTH_YEAR_RE = re.compile(r"^\d{4}-\d{2}$")


class PayrollService:
    def __init__(
        self,
        payrolls: PayrollRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        employees: EmployeeRepository,
        settings: SettingsRepository,
        work_calendar: WorkCalendarService,
        *,
        calculator: Optional[PayrollCalculator] = None,
        system_logs: Optional[SystemLogRepository] = None,
    ):
        self._payrolls = payrolls
        self._attendance = attendance
        self._leaves = leaves
        self._employees = employees
        self._settings = settings
        self._work_calendar = work_calendar
        self._calculator = calculator or StandardPayrollCalculator()
        self._system_logs = system_logs

    def _approved_intervals(self, employee_id: int, date_range: DateRange) -> list[LeaveInterval]:
        rows = self._leaves.list_approved_overlapping(
            employee_id=int(employee_id),
            start_date=date_range.start,
            end_date=date_range.end,
        )
        return [
            LeaveInterval(start=r.start_date, end=r.end_date)
            for r in rows
            if r.status == LeaveStatus.APPROVED and r.start_date and r.end_date
        ]

    def _standard_hours(self) -> tuple[float, tuple[str, ...]]:
        try:
            stored = self._settings.get_standard_hours()
        except StorageError as e:
            message = f"Workday settings could not be loaded; using {DEFAULT_STANDARD_HOURS:g} standard hours."
            logger.warning("%s cause=%s", message, e)
            return DEFAULT_STANDARD_HOURS, (message,)
        hours = standard_hours_from_setting(stored)
        return (hours if hours is not None else DEFAULT_STANDARD_HOURS), ()

    def total_work_hours_for_month(self, *, employee_id: int, year: int, month: int) -> float:
        month_range = DateRange.for_month(year, month)
        minutes = self._attendance.sum_completed_minutes(
            employee_id=int(employee_id),
            start_date=month_range.start,
            end_date=month_range.end,
        )
        return minutes / 60

    def approved_leave_days_for_month(self, *, employee_id: int, year: int, month: int) -> WorkingDayCount:
        month_range = DateRange.for_month(year, month)
        lookup = self._work_calendar.calendar_for(month_range)
        days = accumulate_leave_days(self._approved_intervals(employee_id, month_range), month_range, lookup.calendar)
        return WorkingDayCount(days=days, warnings=lookup.warnings)

    def month_summary(self, *, employee_id: int, year: int, month: int) -> MonthlyPayrollSummary:
        employee = self._employees.get(int(employee_id))
        if not employee:
            raise NotFoundError("Employee record not found.")

        month_range = DateRange.for_month(year, month)
        lookup = self._work_calendar.calendar_for(month_range)
        standard_hours, hour_warnings = self._standard_hours()

        working_days = count_working_days(month_range, lookup.calendar)
        leave_days = accumulate_leave_days(
            self._approved_intervals(employee.employee_id, month_range), month_range, lookup.calendar
        )
        key = month_key(year, month)

        return MonthlyPayrollSummary(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            month_year=key,
            total_work_hours=round(self.total_work_hours_for_month(employee_id=employee.employee_id, year=year, month=month), 2),
            approved_leave_days=leave_days,
            working_days=working_days,
            standard_hours_per_day=standard_hours,
            expected_work_hours=round(working_days * standard_hours, 2),
            existing=self._payrolls.find_for_month(employee_id=employee.employee_id, month_year=key),
            warnings=lookup.warnings + hour_warnings,
        )

    def save_payroll(
        self,
        *,
        current_role: Role,
        actor: Actor,
        employee_id: object,
        employee_name: str,
        month_year: str,
        hourly_rate: object,
        total_work_hours: object,
        bonus: object,
        deductions: object,
        final_net_salary: object,
        notes: str = "",
    ) -> PayrollSaveResult:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to save payroll.")

        try:
            emp_id = int(str(employee_id).strip())
        except (TypeError, ValueError):
            raise ValidationError("Employee is required.", "employee_id")
        employee_name = require_non_empty(employee_name, "Employee name", field="employee_name")

        month_year = (month_year or "").strip()
        if not _MONTH_YEAR_RE.match(month_year):
            raise ValidationError("Month/Year must be in YYYY-MM format.", "month_year")
        try:
            parse_month_year(month_year)
        except ValueError:
            raise ValidationError("Month/Year must be in YYYY-MM format.", "month_year")

        rate = parse_non_negative_number(hourly_rate, "Hourly rate", field="hourly_rate")
        hours = parse_non_negative_number(total_work_hours, "Total work hours", field="total_work_hours")
        bonus_value = parse_non_negative_number(bonus, "Bonus", field="bonus")
        deductions_value = parse_non_negative_number(deductions, "Deductions", field="deductions")
        final_net = parse_non_negative_number(final_net_salary, "Final net salary", field="final_net_salary")

        breakdown = self._calculator.salary(
            hourly_rate=rate,
            total_work_hours=hours,
            bonus=bonus_value,
            deductions=deductions_value,
        )
        values = PayrollValues(
            employee_id=emp_id,
            employee_name=employee_name,
            month_year=month_year,
            hourly_rate_used=rate,
            total_work_hours=hours,
            base_salary_calculated=breakdown.base_salary,
            bonus_added=breakdown.bonus,
            deductions_applied=breakdown.deductions,
            net_salary_calculated=breakdown.net_salary,
            net_salary_final=round_money(final_net),
            notes=(notes or "").strip(),
        )

        existing = self._payrolls.find_for_month(employee_id=emp_id, month_year=month_year)
        if existing:
            self._payrolls.update(record_id=existing.record_id, values=values)
            record_id, created = existing.record_id, False
            message = f"Payroll for {employee_name} for {month_year} updated successfully."
        else:
            record_id, created = self._payrolls.create(values=values), True
            message = f"Payroll for {employee_name} for {month_year} saved successfully."

        log_system_event(
            "Save Payroll",
            actor,
            store=self._system_logs,
            employee_id=emp_id,
            month_year=month_year,
            net_salary_final=values.net_salary_final,
            created=created,
        )
        return PayrollSaveResult(record_id=record_id, created=created, message=message)

    def annual_report(self, *, year: int) -> AnnualReport:
        if not MINYEAR <= year <= MAXYEAR:
            raise ValidationError(f"Year must be between {MINYEAR} and {MAXYEAR}.", "year")
        year_range = DateRange.for_year(year)
        lookup = self._work_calendar.calendar_for(year_range)
        month_ranges = [DateRange.for_month(year, m) for m in range(1, 13)]

        rows: list[AnnualReportRow] = []
        for employee in self._employees.list_active():
            records = {
                r.values.month_year: r.values
                for r in self._payrolls.list_for_year(employee_id=employee.employee_id, year=year)
            }
            intervals = self._approved_intervals(employee.employee_id, year_range)

            monthly: list[MonthlySalary] = []
            total_hours = 0.0
            total_net = 0.0
            leave_days = 0
            for month, month_range in enumerate(month_ranges, start=1):
                values = records.get(month_key(year, month))
                if values:
                    total_hours += values.total_work_hours
                    total_net += values.net_salary_final
                monthly.append(
                    MonthlySalary(
                        month=calendar.month_abbr[month],
                        salary=values.net_salary_final if values else None,
                    )
                )
                leave_days += accumulate_leave_days(intervals, month_range, lookup.calendar)

            rows.append(
                AnnualReportRow(
                    employee_id=employee.employee_id,
                    employee_name=employee.name,
                    employee_code=employee.employee_code,
                    monthly_salaries=monthly,
                    total_annual_work_hours=round(total_hours, 2),
                    total_annual_leave_days=leave_days,
                    total_annual_net_salary=round_money(total_net),
                )
            )

        return AnnualReport(year=year, rows=rows, warnings=lookup.warnings)
