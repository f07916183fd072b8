from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Team:
    """Domain entity: Team.

    `is_active` is stored and returned but does not filter any listing.
    """

    team_id: int
    name: str
    is_active: bool = True
