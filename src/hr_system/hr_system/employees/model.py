from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    employee_id: int
    name: str
    employee_code: Optional[str] = None
    status: str = "Active"
    hourly_rate: float = 0.0
