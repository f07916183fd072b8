import os
from typing import Optional

# APP_ENV value -> settings module; anything unknown runs as development
ENVIRONMENTS = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
    "dev": "config.development",
    "development": "config.development",
}


def get_settings_module(env: Optional[str] = None) -> str:
    name = (env or os.getenv("APP_ENV") or "development").strip().lower()
    return ENVIRONMENTS.get(name, "config.development")
