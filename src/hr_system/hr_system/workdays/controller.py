from __future__ import annotations

from flask import Flask, request

from ..common.web import fail, form_date, json_errors, login_required, ok
from ..container import Container
from ..core.constants import MAX_WORKDAY_RANGE_DAYS
from ..core.exceptions import ValidationError
from .model import DateRange


def register(app: Flask, container: Container) -> None:
    @app.route("/api/workdays", methods=["GET"], endpoint="count_workdays")
    @login_required
    @json_errors
    def count_workdays():
        start = form_date("start", source=request.args)
        end = form_date("end", source=request.args)
        if start is None or end is None:
            return fail("Both start and end dates are required.", field="start" if start is None else "end")
        if (end - start).days + 1 > MAX_WORKDAY_RANGE_DAYS:
            raise ValidationError(f"Date range cannot be longer than {MAX_WORKDAY_RANGE_DAYS} days.", "end")

        result = container.work_calendar_service.count_working_days(DateRange(start, end))
        return ok(
            start=start,
            end=end,
            working_days=result.days,
            warnings=result.warnings,
        )
