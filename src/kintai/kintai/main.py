from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Blueprint, Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    InvalidTokenError,
    MissingTokenError,
    NotFoundError,
    StoreError,
    StoreTimeoutError,
    TokenExpiredError,
    ValidationError,
)
from .database.bootstrap import apply_schema, ensure_admin_user, list_tables
from .database.connection import DBConfig
from .leaves.controller import register as register_leaves
from .settings import Settings
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"

# Most specific first: the first matching class decides the status code.
ERROR_STATUS = (
    (ValidationError, 400),
    (MissingTokenError, 401),
    (TokenExpiredError, 401),
    (InvalidTokenError, 403),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (StoreTimeoutError, 503),
    (StoreError, 500),
)

STORE_ERROR_MESSAGES = {
    500: "サーバーエラーが発生しました。",
    503: "データベースが応答しません。時間をおいて再度お試しください。",
}


def status_for(error: DomainError) -> int:
    for cls, status in ERROR_STATUS:
        if isinstance(error, cls):
            return status
    return 500


def load_settings() -> Settings:
    load_dotenv(override=False)
    settings_module = get_settings_module()
    return Settings.from_module(importlib.import_module(settings_module))


def _prepare_database(settings: Settings) -> None:
    db_config = DBConfig.from_dict(settings.db_config)
    if settings.auto_init_db:
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if settings.auto_seed_db:
        ensure_admin_user(
            db_config,
            email=settings.admin_email,
            password=settings.admin_password,
            user_name=settings.admin_name,
        )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        status = status_for(error)
        if isinstance(error, StoreError):
            # cause already logged where the store call failed
            return jsonify({"message": STORE_ERROR_MESSAGES[status]}), status
        return jsonify({"message": str(error)}), status

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return jsonify({"message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        logger.exception("unhandled error")
        return jsonify({"message": "サーバーエラー"}), 500


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> Flask:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["DEBUG"] = settings.debug
    app.config["TESTING"] = settings.testing
    app.config["KINTAI_SETTINGS"] = settings
    app.json.ensure_ascii = False

    if settings.debug:
        db = settings.db_config
        logger.info(
            "db=%s@%s:%s/%s",
            db.get("user"),
            db.get("host"),
            db.get("port", 3306),
            db.get("database"),
        )

    if container is None:
        _prepare_database(settings)
        container = build_container(settings)
    app.extensions["kintai"] = container

    api = Blueprint("api", __name__, url_prefix=settings.api_prefix or None)
    register_users(api, container)
    register_attendance(api, container)
    register_leaves(api, container)
    app.register_blueprint(api)

    register_error_handlers(app)
    return app


def run() -> None:
    app = create_app()
    settings: Settings = app.config["KINTAI_SETTINGS"]
    app.run(host="0.0.0.0", port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    run()
