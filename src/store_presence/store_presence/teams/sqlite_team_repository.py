from __future__ import annotations

import sqlite3
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone, integrity_error, to_db_bool
from .model import Team
from .repository import TeamRepository


class SQLiteTeamRepository(TeamRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_team(r: dict) -> Team:
        return Team(team_id=int(r["id"]), name=r["name"], is_active=bool(r["is_active"]))

    def list_all(self) -> Sequence[Team]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, is_active FROM teams ORDER BY name")
            return [self._to_team(r) for r in fetchall(cur)]

    def get_by_id(self, team_id: int) -> Optional[Team]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, is_active FROM teams WHERE id=?", (int(team_id),))
            r = fetchone(cur)
            return self._to_team(r) if r else None

    def create(self, *, name: str, is_active: bool) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("INSERT INTO teams(name, is_active) VALUES(?, ?)", (name, to_db_bool(is_active)))
                return int(cur.lastrowid)
        except sqlite3.IntegrityError as e:
            raise integrity_error(e) from e

    def update(self, *, team_id: int, name: str, is_active: bool) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "UPDATE teams SET name=?, is_active=? WHERE id=?",
                    (name, to_db_bool(is_active), int(team_id)),
                )
                return cur.rowcount > 0
        except sqlite3.IntegrityError as e:
            raise integrity_error(e) from e

    def delete_by_id(self, team_id: int) -> bool:
        # employees.team_id is ON DELETE SET NULL
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM teams WHERE id=?", (int(team_id),))
            return cur.rowcount > 0
