from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from ..core.exceptions import UniquenessViolation, ValidationError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [dict(r) for r in rows or []]


def to_db_bool(value: bool) -> int:
    return 1 if value else 0


def integrity_error(err: sqlite3.IntegrityError) -> ValidationError:
    """Map a constraint failure onto the domain error surfaced to callers."""

    message = str(err)
    if message.startswith("UNIQUE constraint failed"):
        return UniquenessViolation(message)
    return ValidationError(message)
