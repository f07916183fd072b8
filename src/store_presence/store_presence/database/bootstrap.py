from __future__ import annotations

import logging
from pathlib import Path

from ..core.constants import DEMO_TEAMS
from ..core.enums import Role
from .connection import DatabaseConnection
from .sqlite_base import db_cursor, fetchone

logger = logging.getLogger(__name__)

# (name, team, epi_cert, sst_cert, active, role); presence is seeded on even indexes
DEMO_EMPLOYEES = (
    ("Alice Martin", "Sales", 1, 0, 1, Role.EMPLOYEE),
    ("Bruno Silva", "Operations", 0, 1, 1, Role.EMPLOYEE),
    ("Chloe Dupont", "Operations", 1, 1, 1, Role.EMPLOYEE),
    ("David Rossi", "Support", 0, 0, 1, Role.EMPLOYEE),
    ("Eva Kim", None, 0, 0, 1, Role.VISITOR),
    ("Farid Lopez", "Sales", 0, 1, 0, Role.EMPLOYEE),
)


def ensure_parent_dir(db_path: str | Path) -> None:
    path = Path(db_path)
    if str(path) == ":memory:":
        return
    path.parent.mkdir(parents=True, exist_ok=True)


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    ensure_parent_dir(conn_factory.path)

    sql = Path(schema_path).read_text(encoding="utf-8")
    conn = conn_factory.connect()
    try:
        conn.executescript(sql)
        conn.commit()
    finally:
        conn.close()


def seed_demo_data(conn_factory: DatabaseConnection) -> bool:
    """Insert demo teams/employees when the teams table is empty.

    Returns True if anything was written.
    """

    with db_cursor(conn_factory) as (_, cur):
        cur.execute("SELECT COUNT(*) AS count FROM teams")
        if int(fetchone(cur)["count"]) > 0:
            return False

        team_ids: dict[str, int] = {}
        for name in DEMO_TEAMS:
            cur.execute("INSERT INTO teams(name, is_active) VALUES(?, 1)", (name,))
            team_ids[name] = int(cur.lastrowid)

        for index, (name, team, epi, sst, active, role) in enumerate(DEMO_EMPLOYEES):
            cur.execute(
                """
                INSERT INTO employees(name, team_id, epi_cert, sst_cert, active, role)
                VALUES(?,?,?,?,?,?)
                """,
                (name, team_ids.get(team) if team else None, epi, sst, active, role.value),
            )
            cur.execute(
                "INSERT INTO presence(employee_id, is_present, updated_at) VALUES(?, ?, CURRENT_TIMESTAMP)",
                (int(cur.lastrowid), 1 if index % 2 == 0 else 0),
            )

    logger.info("Seeded %d teams and %d employees", len(DEMO_TEAMS), len(DEMO_EMPLOYEES))
    return True


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
        return [row[0] for row in cur.fetchall()]
