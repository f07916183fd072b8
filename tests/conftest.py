from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from src.store_presence.store_presence.database.bootstrap import apply_schema
from src.store_presence.store_presence.database.connection import DBConfig, DatabaseConnection
from src.store_presence.store_presence.main import SCHEMA_PATH, create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 30, 0)


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    return str(tmp_path / "data" / "presence.sqlite")


@pytest.fixture
def conn_factory(db_path: str) -> DatabaseConnection:
    conn = DatabaseConnection(DBConfig(path=db_path))
    apply_schema(conn, schema_path=SCHEMA_PATH)
    return conn


def _make_app(db_path: str, *, seed: bool):
    return create_app(
        {
            "TESTING": True,
            "DB_PATH": db_path,
            "AUTO_INIT_DB": True,
            "AUTO_SEED_DB": seed,
        }
    )


@pytest.fixture
def app(db_path: str):
    return _make_app(db_path, seed=False)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded_client(db_path: str):
    return _make_app(db_path, seed=True).test_client()
