from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class SystemLog:
    """One stored audit event."""

    log_id: int
    action: str
    actor_id: Optional[str] = None
    actor_email: Optional[str] = None
    actor_role: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)
    created_at: Optional[datetime] = None
