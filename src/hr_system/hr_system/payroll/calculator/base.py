from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import SalaryBreakdown


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def salary(
        self,
        *,
        hourly_rate: float,
        total_work_hours: float,
        bonus: float,
        deductions: float,
    ) -> SalaryBreakdown:
        raise NotImplementedError
