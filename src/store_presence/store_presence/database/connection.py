from __future__ import annotations

import sqlite3
from dataclasses import dataclass


@dataclass
class DBConfig:
    path: str
    timeout: float = 5.0


class DatabaseConnection:
    """DB connection factory, built once at startup and passed to repositories.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    """

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def path(self) -> str:
        return self._config.path

    def connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._config.path, timeout=self._config.timeout)
        conn.row_factory = sqlite3.Row
        # SQLite leaves FK enforcement off per connection
        conn.execute("PRAGMA foreign_keys = ON")
        return conn
