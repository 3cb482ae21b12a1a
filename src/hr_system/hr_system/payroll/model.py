from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SalaryBreakdown:
    base_salary: float
    bonus: float
    deductions: float
    net_salary: float


@dataclass(frozen=True)
class PayrollValues:
    """Stored fields of one employee's payroll for one month (``month_year`` = YYYY-MM)."""

    employee_id: int
    employee_name: str
    month_year: str
    hourly_rate_used: float
    total_work_hours: float
    base_salary_calculated: float
    bonus_added: float
    deductions_applied: float
    net_salary_calculated: float
    net_salary_final: float
    notes: str = ""


@dataclass(frozen=True)
class PayrollRecord:
    record_id: int
    values: PayrollValues
    calculated_at: Optional[datetime] = None
    last_updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class PayrollSaveResult:
    record_id: int
    created: bool
    message: str


@dataclass(frozen=True)
class MonthlyPayrollSummary:
    """Inputs shown next to the payroll form for one employee and month."""

    employee_id: int
    employee_name: str
    month_year: str
    total_work_hours: float
    approved_leave_days: int
    working_days: int
    standard_hours_per_day: float
    expected_work_hours: float
    existing: Optional[PayrollRecord] = None
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class MonthlySalary:
    month: str
    salary: Optional[float]


@dataclass(frozen=True)
class AnnualReportRow:
    employee_id: int
    employee_name: str
    employee_code: Optional[str]
    monthly_salaries: list[MonthlySalary]
    total_annual_work_hours: float
    total_annual_leave_days: int
    total_annual_net_salary: float


@dataclass(frozen=True)
class AnnualReport:
    year: int
    rows: list[AnnualReportRow] = field(default_factory=list)
    warnings: tuple[str, ...] = ()
