from __future__ import annotations

from .base import PayrollCalculator
from ..model import SalaryBreakdown


def round_money(value: float) -> float:
    return round(float(value), 2)


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: base = rate * hours, net = base + bonus - deductions (2 decimals)."""

    def salary(
        self,
        *,
        hourly_rate: float,
        total_work_hours: float,
        bonus: float,
        deductions: float,
    ) -> SalaryBreakdown:
        base = hourly_rate * total_work_hours
        net = base + bonus - deductions
        return SalaryBreakdown(
            base_salary=round_money(base),
            bonus=round_money(bonus),
            deductions=round_money(deductions),
            net_salary=round_money(net),
        )
