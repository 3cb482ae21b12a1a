from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PayrollRecord, PayrollValues


class PayrollRepository(Protocol):
    def find_for_month(self, *, employee_id: int, month_year: str) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def create(self, *, values: PayrollValues) -> int:
        raise NotImplementedError

    def update(self, *, record_id: int, values: PayrollValues) -> bool:
        raise NotImplementedError

    def list_for_year(self, *, employee_id: int, year: int) -> Sequence[PayrollRecord]:
        raise NotImplementedError
