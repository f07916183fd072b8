import os

from .config import BASE_DIR, DEFAULT_PORT, env_flag

SECRET_KEY = "test-secret"

DB_PATH = os.getenv("DB_PATH", str(BASE_DIR / "data" / "presence_test.sqlite"))

HOST = "127.0.0.1"
PORT = DEFAULT_PORT

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
