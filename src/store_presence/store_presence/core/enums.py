from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Employee role, orthogonal to team and certifications."""

    EMPLOYEE = "employee"
    VISITOR = "visitor"
