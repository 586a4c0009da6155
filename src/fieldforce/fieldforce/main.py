from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, send_file
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .ads.controller import register as register_ads
from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import UPLOAD_URL_PREFIX
from .core.exceptions import DomainError
from .customers.controller import register as register_customers
from .database.bootstrap import apply_schema, ensure_admin_user
from .employees.controller import register as register_employees
from .feedback.controller import register as register_feedback
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"error": e.message}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unhandled error")
        return jsonify({"error": "Internal server error"}), 500


def _register_uploads(app: Flask, container: Container) -> None:
    @app.route(f"/{UPLOAD_URL_PREFIX}/<path:filename>", methods=["GET"], endpoint="uploads")
    def uploads(filename: str):
        return send_file(container.blobs.resolve(filename))


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["MAX_CONTENT_LENGTH"] = getattr(settings, "MAX_CONTENT_LENGTH", None)
    CORS(app)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")

        admin_user_id = getattr(settings, "ADMIN_USER_ID", None)
        admin_password = getattr(settings, "ADMIN_PASSWORD", None)
        if admin_user_id and admin_password:
            ensure_admin_user(db_config, user_id=admin_user_id, password=admin_password)

        container = build_container(
            db_config=db_config,
            secret=getattr(settings, "SECRET_KEY"),
            upload_dir=getattr(settings, "UPLOAD_DIR"),
            pool_size=getattr(settings, "DB_POOL_SIZE"),
            pool_timeout=getattr(settings, "DB_POOL_TIMEOUT"),
            enforce_roles=getattr(settings, "ENFORCE_ROLES", False),
        )

    app.extensions["fieldforce"] = container

    _register_error_handlers(app)
    _register_uploads(app, container)
    register_users(app, container)
    register_employees(app, container)
    register_customers(app, container)
    register_feedback(app, container)
    register_attendance(app, container)
    register_ads(app, container)

    return app
