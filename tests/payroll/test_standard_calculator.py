import pytest

from src.hr_system.hr_system.payroll.calculator.standard_calculator import StandardPayrollCalculator, round_money


def test_standard_calculator_adds_bonus_and_subtracts_deductions():
    breakdown = StandardPayrollCalculator().salary(hourly_rate=12.5, total_work_hours=160, bonus=100, deductions=50)

    assert breakdown.base_salary == 2000.0
    assert breakdown.bonus == 100.0
    assert breakdown.deductions == 50.0
    assert breakdown.net_salary == 2050.0


def test_standard_calculator_rounds_to_cents():
    breakdown = StandardPayrollCalculator().salary(hourly_rate=10.333, total_work_hours=3, bonus=0, deductions=0)
    assert breakdown.base_salary == pytest.approx(31.0)
    assert round_money(1.234) == 1.23
