from __future__ import annotations

from flask import Flask, request

from ..common.web import current_role, form_date, json_errors, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/system-logs", methods=["GET"], endpoint="list_system_logs")
    @login_required
    @json_errors
    def list_system_logs():
        logs = container.system_log_service.list_logs(
            current_role=current_role(),
            action=request.args.get("action"),
            on_date=form_date("date", source=request.args),
        )
        return ok(logs=logs)

    @app.route("/api/system-logs/<int:log_id>", methods=["GET"], endpoint="system_log_detail")
    @login_required
    @json_errors
    def system_log_detail(log_id: int):
        return ok(log=container.system_log_service.get_log(current_role=current_role(), log_id=log_id))
