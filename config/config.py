import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]

# Single-file store; the parent directory is created on startup.
DEFAULT_DB_PATH = str(BASE_DIR / "data" / "presence.sqlite")

DEFAULT_PORT = 4000
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def env_flag(name: str, default: str) -> bool:
    return bool(int(os.getenv(name, default)))
