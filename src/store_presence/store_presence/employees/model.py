from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object, no DB access code. `team_name` is filled by the
    LEFT JOIN on reads and stays None for employees without a team.
    """

    employee_id: int
    name: str
    team_id: Optional[int]
    epi_cert: bool = False
    sst_cert: bool = False
    active: bool = True
    role: Role = Role.EMPLOYEE
    team_name: Optional[str] = None
