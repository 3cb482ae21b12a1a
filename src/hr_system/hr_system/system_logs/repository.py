from __future__ import annotations

from datetime import date
from typing import Any, Optional, Protocol, Sequence

from .model import SystemLog


class SystemLogRepository(Protocol):
    def add(
        self,
        *,
        action: str,
        actor_id: Optional[str],
        actor_email: Optional[str],
        actor_role: Optional[str],
        details: dict[str, Any],
    ) -> int:
        raise NotImplementedError

    def get(self, *, log_id: int) -> Optional[SystemLog]:
        raise NotImplementedError

    def list_logs(self, *, action: Optional[str] = None, on_date: Optional[date] = None, limit: int = 200) -> Sequence[SystemLog]:
        """Newest first."""

        raise NotImplementedError
