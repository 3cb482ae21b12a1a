from __future__ import annotations

from flask import Flask, request, session

from ..common.web import current_actor, current_role, fail, form_date, json_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves", methods=["POST"], endpoint="submit_leave")
    @login_required
    @json_errors
    def submit_leave():
        raw_employee_id = (request.form.get("employee_id") or "").strip()
        result = container.leave_service.submit_leave(
            employee_id=int(raw_employee_id) if raw_employee_id.isdigit() else None,
            leave_type=request.form.get("leave_type", ""),
            start_date=form_date("start_date"),
            end_date=form_date("end_date"),
            reason=request.form.get("reason", ""),
            attachment_url=request.form.get("attachment_url", ""),
        )
        return ok(
            "Leave request submitted successfully and is pending approval.",
            warnings=result.warnings,
            status=201,
            request_id=result.request_id,
            number_of_days=result.number_of_days,
        )

    @app.route("/api/leaves/mine", methods=["GET"], endpoint="my_leaves")
    @login_required
    @json_errors
    def my_leaves():
        employee_id = session.get("employee_id")
        if not employee_id:
            return fail("No employee record is linked to this account.")
        return ok(requests=container.leave_service.list_for_employee(employee_id=int(employee_id)))

    @app.route("/api/leaves", methods=["GET"], endpoint="list_leaves")
    @login_required
    @json_errors
    def list_leaves():
        return ok(requests=container.leave_service.list_requests(status=request.args.get("status") or None))

    @app.route("/api/leaves/<int:request_id>/status", methods=["POST"], endpoint="update_leave_status")
    @login_required
    @json_errors
    def update_leave_status(request_id: int):
        status = container.leave_service.update_status(
            current_role=current_role(),
            actor=current_actor(),
            request_id=request_id,
            new_status=request.form.get("new_status", ""),
            manager_notes=request.form.get("manager_notes", ""),
        )
        return ok(f"Leave request status updated to {status.value}.", status_value=status.value)

    @app.route("/api/leaves/<int:request_id>", methods=["POST"], endpoint="edit_leave")
    @login_required
    @json_errors
    def edit_leave(request_id: int):
        result = container.leave_service.edit_leave(
            current_role=current_role(),
            actor=current_actor(),
            request_id=request_id,
            leave_type=request.form.get("leave_type", ""),
            start_date=form_date("start_date"),
            end_date=form_date("end_date"),
            reason=request.form.get("reason", ""),
            status=request.form.get("status", ""),
        )
        return ok(
            "Leave request updated successfully.",
            warnings=result.warnings,
            request_id=result.request_id,
            number_of_days=result.number_of_days,
        )

    @app.route("/api/leaves/<int:request_id>", methods=["DELETE"], endpoint="delete_leave")
    @login_required
    @json_errors
    def delete_leave(request_id: int):
        container.leave_service.delete_leave(
            current_role=current_role(),
            actor=current_actor(),
            request_id=request_id,
        )
        return ok("Leave request deleted successfully.")
