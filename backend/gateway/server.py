"""
API gateway: combines the users and events blueprints.
This is the local entrypoint for development.
"""

import atexit
import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from backend.auth_service.routes import users_bp
from backend.common.config import Settings
from backend.database.db_connection import Database
from backend.events_service.routes import events_bp
from backend.gateway.responses import register_error_handlers


def configure_logging(level: str = "INFO") -> None:
    """Basic console logging during API requests."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="[%(levelname)s] %(asctime)s - %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> Flask:
    """
    Application factory for creating the Flask app.

    Args:
        settings (Settings, optional): Defaults to Settings.from_env().
        database (Database, optional): Storage handle to serve requests with.
            When omitted, one is built from settings, opened now, and closed
            when the interpreter exits.

    Returns:
        Flask: The configured Flask application.
    """
    settings = settings or Settings.from_env()

    if database is None:
        database = Database(
            settings.database_url,
            min_connections=settings.db_pool_min,
            max_connections=settings.db_pool_max,
        )
        database.open()
        atexit.register(database.close)

    app = Flask(__name__)
    app.config.from_mapping(settings.to_flask_config())
    app.extensions["database"] = database

    CORS(app, resources={
        r"/*": {
            "origins": settings.cors_origins,
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization"],
        }
    })

    # --- REGISTER BLUEPRINTS ---
    app.register_blueprint(users_bp, url_prefix="/users")
    app.register_blueprint(events_bp, url_prefix="/events")
    register_error_handlers(app)

    # --- BASIC HEALTH CHECKPOINTS ---
    @app.route("/")
    def ping():
        """
        Root URL for simple 'online' check.
        """
        return jsonify({"status": "ok"}), 200

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "database": database.is_open}), 200

    logging.info("All blueprints registered successfully.")
    return app


if __name__ == "__main__":
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = create_app(settings)
    app.run(host="0.0.0.0", port=settings.port, debug=False)
