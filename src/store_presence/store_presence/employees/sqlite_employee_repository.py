from __future__ import annotations

import sqlite3
from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone, integrity_error, to_db_bool
from ..presence.sqlite_presence_repository import insert_default_presence
from .model import Employee
from .repository import EmployeeRepository

_SELECT_EMPLOYEE = """
    SELECT e.id, e.name, e.team_id, e.epi_cert, e.sst_cert, e.active, e.role,
           t.name AS team_name
    FROM employees e
    LEFT JOIN teams t ON t.id = e.team_id
"""


class SQLiteEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_employee(r: dict) -> Employee:
        return Employee(
            employee_id=int(r["id"]),
            name=r["name"],
            team_id=int(r["team_id"]) if r.get("team_id") is not None else None,
            epi_cert=bool(r["epi_cert"]),
            sst_cert=bool(r["sst_cert"]),
            active=bool(r["active"]),
            role=Role(r["role"]),
            team_name=r.get("team_name"),
        )

    def list_all(self, *, team_id: Optional[int] = None, active: Optional[bool] = None) -> Sequence[Employee]:
        clauses = ["1=1"]
        params: list[object] = []
        if team_id is not None:
            clauses.append("e.team_id=?")
            params.append(int(team_id))
        if active is not None:
            clauses.append("e.active=?")
            params.append(to_db_bool(active))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT_EMPLOYEE} WHERE {where} ORDER BY e.name", tuple(params))
            return [self._to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT_EMPLOYEE} WHERE e.id=?", (int(employee_id),))
            r = fetchone(cur)
            return self._to_employee(r) if r else None

    def create(
        self,
        *,
        name: str,
        team_id: Optional[int],
        epi_cert: bool,
        sst_cert: bool,
        active: bool,
        role: Role,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees(name, team_id, epi_cert, sst_cert, active, role)
                    VALUES(?,?,?,?,?,?)
                    """,
                    (name, team_id, to_db_bool(epi_cert), to_db_bool(sst_cert), to_db_bool(active), role.value),
                )
                employee_id = int(cur.lastrowid)
                insert_default_presence(cur, employee_id)
                return employee_id
        except sqlite3.IntegrityError as e:
            raise integrity_error(e) from e

    def update(
        self,
        *,
        employee_id: int,
        name: str,
        team_id: Optional[int],
        epi_cert: bool,
        sst_cert: bool,
        active: bool,
        role: Role,
    ) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    UPDATE employees
                    SET name=?, team_id=?, epi_cert=?, sst_cert=?, active=?, role=?
                    WHERE id=?
                    """,
                    (
                        name,
                        team_id,
                        to_db_bool(epi_cert),
                        to_db_bool(sst_cert),
                        to_db_bool(active),
                        role.value,
                        int(employee_id),
                    ),
                )
                return cur.rowcount > 0
        except sqlite3.IntegrityError as e:
            raise integrity_error(e) from e

    def delete_by_id(self, employee_id: int) -> bool:
        # presence.employee_id is ON DELETE CASCADE
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=?", (int(employee_id),))
            return cur.rowcount > 0

    def set_active(self, employee_id: int, *, active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET active=? WHERE id=?", (to_db_bool(active), int(employee_id)))
            return cur.rowcount > 0
