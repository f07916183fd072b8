from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.validators import optional_id, parse_role, require_non_empty
from ..core.enums import Role
from ..core.exceptions import NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employees (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self, *, team_id: Optional[int] = None, active: Optional[bool] = None) -> Sequence[Employee]:
        return self._employees.list_all(team_id=team_id, active=active)

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create_employee(
        self,
        *,
        name: str,
        team_id: Any = None,
        epi_cert: bool = False,
        sst_cert: bool = False,
        active: bool = True,
        role: Any = Role.EMPLOYEE,
    ) -> Employee:
        name = require_non_empty(name, "Name")
        employee_id = self._employees.create(
            name=name,
            team_id=optional_id(team_id, "teamId"),
            epi_cert=bool(epi_cert),
            sst_cert=bool(sst_cert),
            active=bool(active),
            role=parse_role(role),
        )
        logger.info("Created employee %s (%s)", employee_id, name)
        return self.get_employee(employee_id)

    def update_employee(
        self,
        *,
        employee_id: int,
        name: str,
        team_id: Any = None,
        epi_cert: bool = False,
        sst_cert: bool = False,
        active: bool = True,
        role: Any = Role.EMPLOYEE,
    ) -> Employee:
        """Full replace: omitted fields fall back to their create defaults."""

        self.get_employee(employee_id)
        name = require_non_empty(name, "Name")
        updated = self._employees.update(
            employee_id=int(employee_id),
            name=name,
            team_id=optional_id(team_id, "teamId"),
            epi_cert=bool(epi_cert),
            sst_cert=bool(sst_cert),
            active=bool(active),
            role=parse_role(role),
        )
        if not updated:
            raise NotFoundError("Employee not found")
        logger.info("Updated employee %s (%s)", employee_id, name)
        return self.get_employee(employee_id)

    def delete_employee(self, *, employee_id: int) -> None:
        if not self._employees.delete_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s", employee_id)

    def set_active(self, *, employee_id: int, active: bool) -> bool:
        # Presence flag is kept; reads filter on active instead
        if not self._employees.set_active(int(employee_id), active=bool(active)):
            raise NotFoundError("Employee not found")
        logger.info("Set employee %s active=%s", employee_id, bool(active))
        return bool(active)
