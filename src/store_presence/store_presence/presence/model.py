from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class PresenceRecord:
    """Domain entity: one presence row per employee."""

    employee_id: int
    is_present: bool
    updated_at: datetime


@dataclass(frozen=True)
class PresentEmployeeRow:
    """Read-model for the presence listing (present and active employees only)."""

    employee_id: int
    name: str
    role: Role
    team_id: Optional[int]
    team_name: Optional[str]
    is_present: bool
    updated_at: datetime


@dataclass(frozen=True)
class TeamPresence:
    team_id: int
    team_name: str
    present_count: int


@dataclass(frozen=True)
class PresenceSummary:
    total_present: int
    epi_present: int
    sst_present: int
    visitors_present: int
    per_team: List[TeamPresence] = field(default_factory=list)
