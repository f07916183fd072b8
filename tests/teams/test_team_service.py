from __future__ import annotations

from typing import Optional

import pytest

from src.store_presence.store_presence.core.exceptions import NotFoundError, UniquenessViolation, ValidationError
from src.store_presence.store_presence.teams.model import Team
from src.store_presence.store_presence.teams.service import TeamService


class InMemoryTeams:
    def __init__(self):
        self._teams: dict[int, Team] = {}
        self._next_id = 1

    def list_all(self):
        return sorted(self._teams.values(), key=lambda t: t.name)

    def get_by_id(self, team_id: int) -> Optional[Team]:
        return self._teams.get(team_id)

    def _check_unique(self, name: str, team_id: Optional[int] = None) -> None:
        if any(t.name == name and t.team_id != team_id for t in self._teams.values()):
            raise UniquenessViolation("UNIQUE constraint failed: teams.name")

    def create(self, *, name: str, is_active: bool) -> int:
        self._check_unique(name)
        tid = self._next_id
        self._next_id += 1
        self._teams[tid] = Team(team_id=tid, name=name, is_active=is_active)
        return tid

    def update(self, *, team_id: int, name: str, is_active: bool) -> bool:
        if team_id not in self._teams:
            return False
        self._check_unique(name, team_id)
        self._teams[team_id] = Team(team_id=team_id, name=name, is_active=is_active)
        return True

    def delete_by_id(self, team_id: int) -> bool:
        return self._teams.pop(team_id, None) is not None


def test_create_team_defaults_to_active_and_strips_name():
    svc = TeamService(InMemoryTeams())

    team = svc.create_team(name="  Sales ")

    assert team == Team(team_id=1, name="Sales", is_active=True)


@pytest.mark.parametrize("name", [None, "", "   "])
def test_create_team_requires_name(name):
    svc = TeamService(InMemoryTeams())

    with pytest.raises(ValidationError):
        svc.create_team(name=name)


def test_duplicate_team_name_surfaces_constraint_message():
    svc = TeamService(InMemoryTeams())
    svc.create_team(name="Sales")

    with pytest.raises(UniquenessViolation, match="UNIQUE constraint failed"):
        svc.create_team(name="Sales")


def test_list_teams_is_ordered_by_name():
    svc = TeamService(InMemoryTeams())
    for name in ("Support", "Operations", "Sales"):
        svc.create_team(name=name)

    assert [t.name for t in svc.list_teams()] == ["Operations", "Sales", "Support"]


def test_update_team_renames_and_deactivates():
    repo = InMemoryTeams()
    svc = TeamService(repo)
    team = svc.create_team(name="Sales")

    updated = svc.update_team(team_id=team.team_id, name="Retail", is_active=False)

    assert updated == Team(team_id=team.team_id, name="Retail", is_active=False)
    assert repo.get_by_id(team.team_id) == updated


def test_update_missing_team_raises_not_found():
    svc = TeamService(InMemoryTeams())

    with pytest.raises(NotFoundError):
        svc.update_team(team_id=42, name="Ghost")


def test_delete_missing_team_raises_not_found():
    svc = TeamService(InMemoryTeams())

    with pytest.raises(NotFoundError):
        svc.delete_team(team_id=42)


@pytest.mark.parametrize("name", ["", "   ", None])
def test_update_missing_team_is_not_found_before_name_check(name):
    svc = TeamService(InMemoryTeams())

    with pytest.raises(NotFoundError):
        svc.update_team(team_id=42, name=name)


def test_update_existing_team_still_requires_name():
    svc = TeamService(InMemoryTeams())
    team = svc.create_team(name="Sales")

    with pytest.raises(ValidationError, match="Name is required"):
        svc.update_team(team_id=team.team_id, name="  ")
