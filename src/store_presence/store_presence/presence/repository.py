from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import PresenceRecord, PresenceSummary, PresentEmployeeRow


class PresenceRepository(Protocol):
    def ensure_for_employee(self, employee_id: int) -> None:
        """Create the default-absent row if the employee has none."""

        raise NotImplementedError

    def upsert(self, *, employee_id: int, is_present: bool, updated_at: datetime) -> None:
        """Create or overwrite the presence row of an employee in one statement."""

        raise NotImplementedError

    def get_for_employee(self, employee_id: int) -> Optional[PresenceRecord]:
        raise NotImplementedError

    def list_present(self, *, team_id: Optional[int] = None) -> Sequence[PresentEmployeeRow]:
        raise NotImplementedError

    def get_summary(self) -> PresenceSummary:
        raise NotImplementedError
