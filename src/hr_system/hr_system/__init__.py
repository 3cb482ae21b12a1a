"""HR System package.

Feature modules (workdays, leaves, payroll, settings, ...) each carry a thin
Flask controller layer on top of service/repository layers. The working-day
calculator in ``workdays`` is shared by leave and payroll computations.
"""
