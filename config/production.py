import os

from .config import DEFAULT_DB_PATH, DEFAULT_PORT, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_PATH = os.getenv("DB_PATH", DEFAULT_DB_PATH)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
