from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import SystemLog
from .repository import SystemLogRepository


class SystemLogService:
    """Read access to the stored audit trail (admins only)."""

    def __init__(self, logs: SystemLogRepository):
        self._logs = logs

    @staticmethod
    def _require_admin(current_role: Optional[Role]) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("You do not have permission to view the system log.")

    def list_logs(
        self,
        *,
        current_role: Optional[Role],
        action: Optional[str] = None,
        on_date: Optional[date] = None,
    ) -> Sequence[SystemLog]:
        self._require_admin(current_role)
        return self._logs.list_logs(action=(action or "").strip() or None, on_date=on_date, limit=DEFAULT_LIST_LIMIT)

    def get_log(self, *, current_role: Optional[Role], log_id: int) -> SystemLog:
        self._require_admin(current_role)
        log = self._logs.get(log_id=int(log_id))
        if not log:
            raise NotFoundError("Log entry not found.")
        return log
