"""Application factory."""

import os
import uuid

from flask import Flask, g, jsonify, request, send_from_directory
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from config import Config
from errors import error_response
from extensions import jwt, limiter, migrate
from models import db
from routes.auth import auth_bp
from routes.doctors import doctors_bp
from routes.holidays import holidays_bp
from routes.site_blocks import urgency_bp, welcome_bp
from routes.users import users_bp


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Core subsystems
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # CORS
    CORS(
        app,
        resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
        supports_credentials=True,
    )

    # Rate limiting
    app.config.setdefault("RATELIMIT_DEFAULT", app.config.get("RATE_LIMIT", "60 per minute"))
    if not app.config.get("RATELIMIT_KEY_PREFIX"):
        app.config["RATELIMIT_KEY_PREFIX"] = str(uuid.uuid4())
    limiter.init_app(app)

    # Blueprints
    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(users_bp, url_prefix="/users")
    app.register_blueprint(doctors_bp, url_prefix="/doctors")
    app.register_blueprint(holidays_bp, url_prefix="/holidays")
    app.register_blueprint(welcome_bp, url_prefix="/welcome")
    app.register_blueprint(urgency_bp, url_prefix="/urgency")

    # Uploaded avatars are public; only the file backend writes to disk.
    if (app.config.get("IMAGE_STORAGE") or "file").lower() == "file":
        upload_dir = app.config.get("UPLOAD_DIR")
        if upload_dir:
            os.makedirs(upload_dir, exist_ok=True)

        @app.route("/uploads/<path:filename>", methods=["GET"])
        @limiter.exempt
        def uploaded_file(filename: str):
            return send_from_directory(os.path.abspath(app.config["UPLOAD_DIR"]), filename)

    # Health
    @app.route("/health", methods=["GET"])
    def health_check():
        return jsonify({"status": "ok"})

    # Errors
    _register_error_handlers(app)

    return app


def _register_error_handlers(app: Flask) -> None:
    """Register JSON error handlers with request IDs."""

    @app.before_request
    def _assign_request_id():  # pragma: no cover
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    @app.after_request
    def _add_request_id_header(response):  # pragma: no cover
        request_id = g.get("request_id")
        if request_id:
            response.headers.setdefault("X-Request-ID", request_id)
        return response

    @app.errorhandler(HTTPException)
    def _handle_http_exception(error: HTTPException):
        response = error_response(error.description or error.name, error.code or 500)
        for header, value in error.get_headers():
            if header.lower() not in ("content-type", "content-length"):
                response.headers[header] = value
        return response

    @app.errorhandler(SQLAlchemyError)
    def _handle_store_error(error: SQLAlchemyError):
        db.session.rollback()
        app.logger.exception("Unhandled database error", exc_info=error)
        return error_response("Database error.", 500)

    @app.errorhandler(Exception)
    def _handle_unexpected(error: Exception):  # pragma: no cover
        app.logger.exception("Unhandled application error", exc_info=error)
        return error_response("An unexpected error occurred.", 500)


if __name__ == "__main__":
    application = create_app()
    application.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
