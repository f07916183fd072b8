from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self, *, team_id: Optional[int] = None, active: Optional[bool] = None) -> Sequence[Employee]:
        """List employees joined with their team name, ordered by name."""

        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        team_id: Optional[int],
        epi_cert: bool,
        sst_cert: bool,
        active: bool,
        role: Role,
    ) -> int:
        """Insert the employee and its default-absent presence row.

        Returns employee id.
        """

        raise NotImplementedError

    def update(
        self,
        *,
        employee_id: int,
        name: str,
        team_id: Optional[int],
        epi_cert: bool,
        sst_cert: bool,
        active: bool,
        role: Role,
    ) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def set_active(self, employee_id: int, *, active: bool) -> bool:
        raise NotImplementedError
