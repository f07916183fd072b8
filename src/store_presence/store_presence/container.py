from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .employees.service import EmployeeService
from .employees.sqlite_employee_repository import SQLiteEmployeeRepository
from .presence.service import PresenceService
from .presence.sqlite_presence_repository import SQLitePresenceRepository
from .teams.service import TeamService
from .teams.sqlite_team_repository import SQLiteTeamRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    teams_repo: SQLiteTeamRepository
    employees_repo: SQLiteEmployeeRepository
    presence_repo: SQLitePresenceRepository

    team_service: TeamService
    employee_service: EmployeeService
    presence_service: PresenceService


def build_container(*, db_path: str) -> Container:
    conn = DatabaseConnection(DBConfig(path=str(db_path)))

    teams_repo = SQLiteTeamRepository(conn)
    employees_repo = SQLiteEmployeeRepository(conn)
    presence_repo = SQLitePresenceRepository(conn)

    team_service = TeamService(teams_repo)
    employee_service = EmployeeService(employees_repo)
    presence_service = PresenceService(presence_repo, employees_repo)

    return Container(
        conn=conn,
        teams_repo=teams_repo,
        employees_repo=employees_repo,
        presence_repo=presence_repo,
        team_service=team_service,
        employee_service=employee_service,
        presence_service=presence_service,
    )
