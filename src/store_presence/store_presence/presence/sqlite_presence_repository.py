from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_timestamp, parse_timestamp
from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone, integrity_error, to_db_bool
from .model import PresenceRecord, PresenceSummary, PresentEmployeeRow, TeamPresence
from .repository import PresenceRepository

# Present and active employees, the base of every count below
_PRESENT_ACTIVE = """
    FROM presence p
    JOIN employees e ON e.id = p.employee_id
    WHERE p.is_present = 1 AND e.active = 1
"""


def insert_default_presence(cur, employee_id: int) -> None:
    """Insert-if-absent: an existing presence row is never clobbered."""

    cur.execute(
        "INSERT OR IGNORE INTO presence(employee_id, is_present) VALUES(?, 0)",
        (int(employee_id),),
    )


class SQLitePresenceRepository(PresenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def ensure_for_employee(self, employee_id: int) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                insert_default_presence(cur, employee_id)
        except sqlite3.IntegrityError as e:
            raise integrity_error(e) from e

    def upsert(self, *, employee_id: int, is_present: bool, updated_at: datetime) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO presence(employee_id, is_present, updated_at)
                    VALUES(?, ?, ?)
                    ON CONFLICT(employee_id) DO UPDATE SET
                        is_present = excluded.is_present,
                        updated_at = excluded.updated_at
                    """,
                    (int(employee_id), to_db_bool(is_present), format_timestamp(updated_at)),
                )
        except sqlite3.IntegrityError as e:
            raise integrity_error(e) from e

    def get_for_employee(self, employee_id: int) -> Optional[PresenceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, is_present, updated_at FROM presence WHERE employee_id=?",
                (int(employee_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return PresenceRecord(
                employee_id=int(r["employee_id"]),
                is_present=bool(r["is_present"]),
                updated_at=parse_timestamp(r["updated_at"]),
            )

    def list_present(self, *, team_id: Optional[int] = None) -> Sequence[PresentEmployeeRow]:
        query = """
            SELECT e.id, e.name, e.role, e.team_id, t.name AS team_name,
                   p.is_present, p.updated_at
            FROM presence p
            JOIN employees e ON e.id = p.employee_id
            LEFT JOIN teams t ON t.id = e.team_id
            WHERE p.is_present = 1 AND e.active = 1
        """
        params: list[object] = []
        if team_id is not None:
            query += " AND e.team_id=?"
            params.append(int(team_id))
        query += " ORDER BY e.name"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(query, tuple(params))
            return [
                PresentEmployeeRow(
                    employee_id=int(r["id"]),
                    name=r["name"],
                    role=Role(r["role"]),
                    team_id=int(r["team_id"]) if r.get("team_id") is not None else None,
                    team_name=r.get("team_name"),
                    is_present=bool(r["is_present"]),
                    updated_at=parse_timestamp(r["updated_at"]),
                )
                for r in fetchall(cur)
            ]

    def get_summary(self) -> PresenceSummary:
        with db_cursor(self._conn_factory) as (_, cur):
            # sqlite3 never opens a transaction before SELECT on its own; the
            # explicit BEGIN holds one read snapshot across all counts
            cur.execute("BEGIN")

            def count(extra: str = "") -> int:
                cur.execute(f"SELECT COUNT(*) AS count {_PRESENT_ACTIVE} {extra}")
                return int(fetchone(cur)["count"])

            total_present = count()
            epi_present = count("AND e.epi_cert = 1")
            sst_present = count("AND e.sst_cert = 1")
            visitors_present = count(f"AND e.role = '{Role.VISITOR.value}'")

            cur.execute(
                """
                SELECT t.id AS team_id, t.name AS team_name, COUNT(p.employee_id) AS present_count
                FROM teams t
                LEFT JOIN employees e ON e.team_id = t.id AND e.active = 1
                LEFT JOIN presence p ON p.employee_id = e.id AND p.is_present = 1
                GROUP BY t.id, t.name
                ORDER BY t.name
                """
            )
            per_team = [
                TeamPresence(
                    team_id=int(r["team_id"]),
                    team_name=r["team_name"],
                    present_count=int(r["present_count"]),
                )
                for r in fetchall(cur)
            ]

        return PresenceSummary(
            total_present=total_present,
            epi_present=epi_present,
            sst_present=sst_present,
            visitors_present=visitors_present,
            per_team=per_team,
        )
