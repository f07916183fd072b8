import os

from .config import DEFAULT_DB_PATH, DEFAULT_PORT, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_PATH = os.getenv("DB_PATH", DEFAULT_DB_PATH)

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Schema is idempotent (CREATE TABLE IF NOT EXISTS), safe on every start
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Demo teams/employees, only written when the teams table is empty
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "1")
