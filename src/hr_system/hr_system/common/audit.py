from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..core.exceptions import StorageError
from ..system_logs.repository import SystemLogRepository

logger = logging.getLogger("hr_system.audit")


@dataclass(frozen=True)
class Actor:
    """Who performed an action (taken from the signed-in session)."""

    user_id: Optional[int] = None
    email: Optional[str] = None
    role: Optional[str] = None


def log_system_event(
    action: str,
    actor: Optional[Actor] = None,
    *,
    store: Optional[SystemLogRepository] = None,
    **details: Any,
) -> Optional[int]:
    """Log an audit event and, when ``store`` is given, persist it.

    A failed write is logged as a warning and does not undo the action being
    audited. Returns the stored log id, or None.
    """
    actor = actor or Actor()
    logger.info(
        "%s actor_id=%s actor_email=%s actor_role=%s details=%s",
        action,
        actor.user_id,
        actor.email,
        actor.role,
        details,
        extra={"action": action, "details": details},
    )
    if store is None:
        return None
    try:
        return store.add(
            action=action,
            actor_id=None if actor.user_id is None else str(actor.user_id),
            actor_email=actor.email,
            actor_role=actor.role,
            details=details,
        )
    except StorageError as e:
        logger.warning("Audit event %r was not stored: %s", action, e)
        return None
