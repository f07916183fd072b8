from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module
from config.config import DEFAULT_LOG_FORMAT

from .container import build_container
from .core.exceptions import InactiveEmployeeError, NotFoundError, ValidationError
from .database.bootstrap import apply_schema, list_tables, seed_demo_data
from .employees.controller import register as register_employees
from .presence.controller import register as register_presence
from .teams.controller import register as register_teams

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"

_SETTING_KEYS = ("SECRET_KEY", "DB_PATH", "DEBUG", "TESTING", "HOST", "PORT", "LOG_LEVEL", "AUTO_INIT_DB", "AUTO_SEED_DB")


def _load_settings(test_config: Optional[Mapping[str, Any]]) -> dict:
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {key: getattr(settings, key) for key in _SETTING_KEYS if hasattr(settings, key)}
    values["SETTINGS_MODULE"] = settings_module
    if test_config:
        values.update(test_config)
    return values


def register_error_handlers(app: Flask) -> None:
    def error(message: str, status: int):
        return jsonify({"error": message}), status

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return error(str(e), 400)

    @app.errorhandler(InactiveEmployeeError)
    def handle_inactive(e: InactiveEmployeeError):
        return error(str(e), 400)

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return error(str(e), 404)

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        return error(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error: %s", e)
        return error("Internal server error", 500)


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = _load_settings(test_config)
    app.config.update(settings)
    app.secret_key = settings.get("SECRET_KEY")
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))

    logging.basicConfig(level=settings.get("LOG_LEVEL", "INFO"), format=DEFAULT_LOG_FORMAT)

    db_path = str(settings["DB_PATH"])
    logger.info("settings=%s db=%s", settings["SETTINGS_MODULE"], db_path)

    container = build_container(db_path=db_path)

    if settings.get("AUTO_INIT_DB", False):
        apply_schema(container.conn, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))
    if settings.get("AUTO_SEED_DB", False):
        if seed_demo_data(container.conn):
            logger.info("demo seed ready")

    app.extensions["container"] = container

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_teams(app, container)
    register_employees(app, container)
    register_presence(app, container)
    register_error_handlers(app)

    return app
