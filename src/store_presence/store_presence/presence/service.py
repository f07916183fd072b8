from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_utc
from ..core.exceptions import InactiveEmployeeError, NotFoundError
from ..employees.repository import EmployeeRepository
from .model import PresenceRecord, PresenceSummary, PresentEmployeeRow
from .repository import PresenceRepository

logger = logging.getLogger(__name__)


class PresenceService:
    def __init__(self, presence: PresenceRepository, employees: EmployeeRepository):
        self._presence = presence
        self._employees = employees

    def set_presence(self, employee_id: int, *, is_present: bool, now: Optional[datetime] = None) -> PresenceRecord:
        """Mark an active employee present/absent.

        The write itself is a single upsert keyed by employee_id; there is no
        read-then-insert on the presence table. Returns the row as stored.
        """

        now = now or now_utc()

        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        if not employee.active:
            raise InactiveEmployeeError("Employee is inactive")

        self._presence.upsert(employee_id=employee.employee_id, is_present=bool(is_present), updated_at=now)
        logger.info("Set presence of employee %s to %s", employee.employee_id, bool(is_present))
        record = self._presence.get_for_employee(employee.employee_id)
        if not record:
            # deleted between the upsert and the read back
            raise NotFoundError("Employee not found")
        return record

    def list_present(self, *, team_id: Optional[int] = None) -> Sequence[PresentEmployeeRow]:
        return self._presence.list_present(team_id=team_id)

    def get_summary(self) -> PresenceSummary:
        return self._presence.get_summary()
