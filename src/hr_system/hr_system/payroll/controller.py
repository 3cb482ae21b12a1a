from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_month_year
from ..common.web import current_actor, current_role, fail, json_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/<int:employee_id>/<month_year>", methods=["GET"], endpoint="payroll_month_summary")
    @login_required
    @json_errors
    def payroll_month_summary(employee_id: int, month_year: str):
        try:
            year, month = parse_month_year(month_year)
        except ValueError:
            return fail("Month/Year must be in YYYY-MM format.", field="month_year")

        summary = container.payroll_service.month_summary(employee_id=employee_id, year=year, month=month)
        return ok(warnings=summary.warnings, summary=summary)

    @app.route("/api/payroll", methods=["POST"], endpoint="save_payroll")
    @login_required
    @json_errors
    def save_payroll():
        result = container.payroll_service.save_payroll(
            current_role=current_role(),
            actor=current_actor(),
            employee_id=request.form.get("employee_id"),
            employee_name=request.form.get("employee_name", ""),
            month_year=request.form.get("month_year", ""),
            hourly_rate=request.form.get("hourly_rate"),
            total_work_hours=request.form.get("total_work_hours"),
            bonus=request.form.get("bonus"),
            deductions=request.form.get("deductions"),
            final_net_salary=request.form.get("final_net_salary"),
            notes=request.form.get("notes", ""),
        )
        return ok(
            result.message,
            status=201 if result.created else 200,
            payroll_record_id=result.record_id,
        )

    @app.route("/api/payroll/reports/annual/<int:year>", methods=["GET"], endpoint="annual_payroll_report")
    @login_required
    @json_errors
    def annual_payroll_report(year: int):
        report = container.payroll_service.annual_report(year=year)
        return ok(warnings=report.warnings, year=report.year, rows=report.rows)
