# app/__init__.py
# ------------------------------------------------------------
# Flask application factory with clear, layered registration:
# - register_logging()
# - register_extensions()
# - register_store()          (EmployeeStore -> app.extensions)
# - register_blueprints()
# - register_cli()
# - register_error_handlers()
# - register_cors()
#
# Notes:
# - We call load_dotenv() once at import time.
# - create_app(config) takes a dotted path or a config class; tests pass
#   app.config.Testing.
# ------------------------------------------------------------

import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .errors import PayrollError
from .extensions import db, migrate
from . import models  # noqa: F401  ensure models registered

# Load environment from .env exactly once
load_dotenv()

logger = logging.getLogger(__name__)


def create_app(config=None) -> Flask:
    app = Flask(__name__)
    if config is None:
        env = os.getenv("FLASK_ENV", "development").lower()
        config = "app.config.Production" if env == "production" else "app.config.Development"
    app.config.from_object(config)

    register_logging(app)
    register_extensions(app)
    register_store(app)
    register_blueprints(app)
    register_cli(app)
    register_error_handlers(app)
    register_cors(app)

    if app.config.get("AUTO_CREATE_TABLES"):
        with app.app_context():
            db.create_all()
    return app


# ---------------------------
# Registrations (by concern)
# ---------------------------
def register_logging(app: Flask) -> None:
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("app").setLevel(level)


def register_extensions(app: Flask) -> None:
    """Initialize Flask extensions (db, migrate)."""
    db.init_app(app)
    migrate.init_app(app, db)


def register_store(app: Flask) -> None:
    """One EmployeeStore per app; routes and CLI read it from app.extensions."""
    from .services.employees import EmployeeStore
    app.extensions["employee_store"] = EmployeeStore.from_config(app.config)


def register_blueprints(app: Flask) -> None:
    """
    Register all blueprints. Keep imports local to avoid circulars.
    """
    from .main import main as main_blueprint

    app.register_blueprint(main_blueprint)  # /api/...


def register_cli(app: Flask) -> None:
    """Register custom CLI commands."""
    from .cli import register_cli as _register_cli
    _register_cli(app)


def register_error_handlers(app: Flask) -> None:
    """Render every error as {"error": message} JSON."""

    @app.errorhandler(PayrollError)
    def _payroll_error(e: PayrollError):
        if e.status_code >= 500:
            logger.error(f"[api] {request.method} {request.path}: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify(error=e.description or e.name), e.code


def register_cors(app: Flask) -> None:
    """Let the separately served web client call the API."""
    origins = app.config.get("CORS_ORIGINS", "*")

    @app.after_request
    def _cors_headers(resp):
        if origins:
            resp.headers.setdefault("Access-Control-Allow-Origin", origins)
            resp.headers.setdefault("Access-Control-Allow-Headers", "Content-Type")
            resp.headers.setdefault("Access-Control-Allow-Methods", "GET, POST, PUT, DELETE, OPTIONS")
        return resp
