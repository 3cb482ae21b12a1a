from __future__ import annotations

from flask import Flask, request

from ..common.web import current_actor, current_role, form_date, json_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings/holidays", methods=["GET"], endpoint="list_holidays")
    @login_required
    @json_errors
    def list_holidays():
        year = request.args.get("year", type=int)
        return ok(holidays=container.settings_service.list_holidays(year=year))

    @app.route("/api/settings/holidays", methods=["POST"], endpoint="add_holiday")
    @login_required
    @json_errors
    def add_holiday():
        name = (request.form.get("name") or "").strip()
        holiday_id = container.settings_service.add_holiday(
            current_role=current_role(),
            actor=current_actor(),
            name=name,
            holiday_date=form_date("date"),
        )
        return ok(f'Holiday "{name}" added successfully.', status=201, holiday_id=holiday_id)

    @app.route("/api/settings/holidays/<int:holiday_id>", methods=["DELETE"], endpoint="delete_holiday")
    @login_required
    @json_errors
    def delete_holiday(holiday_id: int):
        container.settings_service.delete_holiday(
            current_role=current_role(),
            actor=current_actor(),
            holiday_id=holiday_id,
        )
        return ok("Holiday deleted successfully.")

    @app.route("/api/settings/weekend", methods=["GET"], endpoint="get_weekend")
    @login_required
    @json_errors
    def get_weekend():
        return ok(days=container.settings_service.get_weekend_days())

    @app.route("/api/settings/weekend", methods=["POST"], endpoint="update_weekend")
    @login_required
    @json_errors
    def update_weekend():
        days = container.settings_service.update_weekend_days(
            current_role=current_role(),
            actor=current_actor(),
            values=request.form.getlist("weekend"),
        )
        return ok("Weekend settings updated successfully.", days=days)

    @app.route("/api/settings/workday", methods=["GET"], endpoint="get_workday")
    @login_required
    @json_errors
    def get_workday():
        return ok(standard_hours=container.settings_service.get_standard_hours())

    @app.route("/api/settings/workday", methods=["POST"], endpoint="update_workday")
    @login_required
    @json_errors
    def update_workday():
        hours = container.settings_service.update_standard_hours(
            current_role=current_role(),
            actor=current_actor(),
            hours=request.form.get("hours"),
        )
        return ok("Workday settings updated successfully.", standard_hours=hours)

    @app.route("/api/settings/lists/<list_name>", methods=["GET"], endpoint="list_items")
    @login_required
    @json_errors
    def list_items(list_name: str):
        return ok(items=container.settings_service.list_items(list_name=list_name))

    @app.route("/api/settings/lists/<list_name>", methods=["POST"], endpoint="manage_list_item")
    @login_required
    @json_errors
    def manage_list_item(list_name: str):
        message = container.settings_service.manage_list_item(
            current_role=current_role(),
            actor=current_actor(),
            list_name=list_name,
            operation=request.form.get("operation", ""),
            name=request.form.get("name"),
            item_id=request.form.get("id", type=int),
        )
        return ok(message)
