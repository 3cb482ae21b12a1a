"""Example: using the service layer directly, without Flask.

Counts working days for the current month and prints a payroll summary.
"""

import importlib

from config import get_settings_module

from src.hr_system.hr_system.common.datetime_utils import now_local
from src.hr_system.hr_system.container import build_container
from src.hr_system.hr_system.workdays.model import DateRange


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    today = now_local().date()
    result = container.work_calendar_service.count_working_days(DateRange.for_month(today.year, today.month))
    print(f"Working days in {today:%Y-%m}: {result.days}", *result.warnings, sep="\n")

    print(container.payroll_service.month_summary(employee_id=1, year=today.year, month=today.month))


if __name__ == "__main__":
    main()
