from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from .model import Team
from .repository import TeamRepository

logger = logging.getLogger(__name__)


class TeamService:
    """Use case: manage teams (admin)."""

    def __init__(self, teams: TeamRepository):
        self._teams = teams

    def list_teams(self) -> Sequence[Team]:
        return self._teams.list_all()

    def create_team(self, *, name: str, is_active: bool = True) -> Team:
        name = require_non_empty(name, "Name")
        team_id = self._teams.create(name=name, is_active=bool(is_active))
        logger.info("Created team %s (%s)", team_id, name)
        return Team(team_id=team_id, name=name, is_active=bool(is_active))

    def update_team(self, *, team_id: int, name: str, is_active: bool = True) -> Team:
        # 404 takes precedence over body validation
        if not self._teams.get_by_id(int(team_id)):
            raise NotFoundError("Team not found")
        name = require_non_empty(name, "Name")
        if not self._teams.update(team_id=int(team_id), name=name, is_active=bool(is_active)):
            raise NotFoundError("Team not found")
        logger.info("Updated team %s (%s, active=%s)", team_id, name, bool(is_active))
        return Team(team_id=int(team_id), name=name, is_active=bool(is_active))

    def delete_team(self, *, team_id: int) -> None:
        if not self._teams.delete_by_id(int(team_id)):
            raise NotFoundError("Team not found")
        logger.info("Deleted team %s", team_id)
