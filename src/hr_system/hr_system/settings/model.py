from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class Holiday:
    holiday_id: int
    name: str
    holiday_date: date
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class ListItem:
    """One entry of an organization lookup list (roles, campuses, ...)."""

    item_id: int
    list_name: str
    name: str
