from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.store_presence.store_presence.database.bootstrap import apply_schema, seed_demo_data
from src.store_presence.store_presence.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig(path=str(settings.DB_PATH)))

    apply_schema(conn, schema_path=REPO_ROOT / "database" / "schema.sql")
    if seed_demo_data(conn):
        print(f"OK: Seeded database -> {conn.path}")
    else:
        print(f"SKIP: {conn.path} already has teams, nothing seeded")


if __name__ == "__main__":
    main()
