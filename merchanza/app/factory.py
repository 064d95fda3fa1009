from __future__ import annotations

import logging
from flask import Flask, g, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from merchanza.app.config import Config
from merchanza.app.extensions import db, migrate, cors
from merchanza.app.common.errors import ApiError
from merchanza.app.common.request_context import attach_request_id, init_request_id
from merchanza.app.common.tokens import init_token_service
from merchanza.app.api.register import register_api_blueprints
from merchanza.app.cli import cli_bp
from merchanza.modules.uploads.routes import ensure_upload_folder


def _error_payload(code: str, message: str, details: dict | None = None) -> dict:
    return {
        "success": False,
        "errors": message,
        "code": code,
        "details": details or {},
        "request_id": g.get("request_id"),
    }


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Signing secret is injected config; fail fast when it is missing.
    init_token_service(app)

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})

    ensure_upload_folder(app)

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    app.after_request(attach_request_id)

    # Health endpoint
    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    # Register API blueprints
    register_api_blueprints(app)

    # CLI (flask seed, flask init-db)
    app.register_blueprint(cli_bp)

    @app.get("/")
    def index():
        return "Merchanza backend is running", 200, {"Content-Type": "text/plain; charset=utf-8"}

    # Error handlers
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict(g.get("request_id"))), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        # Normalize Werkzeug errors into our JSON shape
        payload = _error_payload("http_error", err.description, {"name": err.name})
        return jsonify(payload), err.code or 500

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(err: SQLAlchemyError):
        db.session.rollback()
        app.logger.exception("Store error")
        return jsonify(_error_payload("store_error", "Server error")), 500

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        return jsonify(_error_payload("internal_error", "Internal server error")), 500

    return app
