"""
Flask application factory module.

This module creates and configures the task API using the factory
pattern, allowing for different configurations (development, testing,
production) and for swapping the task service behind the HTTP layer.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from flask import Flask
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

from config import get_config

if TYPE_CHECKING:
    from apiserver.service import TaskService

# Initialize SQLAlchemy without binding to app
db = SQLAlchemy()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _ensure_sqlite_db_parent_exists(database_uri: str) -> None:
    """Create parent directories for file-based SQLite URIs when missing."""
    sqlite_prefix = "sqlite:///"
    if not database_uri.startswith(sqlite_prefix):
        return

    sqlite_path = database_uri[len(sqlite_prefix):].split("?", 1)[0]
    if sqlite_path == ":memory:":
        return

    Path(sqlite_path).parent.mkdir(parents=True, exist_ok=True)


def create_app(
    config_name: str | None = None,
    task_service: TaskService | None = None,
) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        task_service: Service the routes delegate to. When None, a
                      SQLAlchemy-backed service is used.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info(f"Creating app with config: {config_class.__name__}")

    os.makedirs(app.instance_path, exist_ok=True)
    _ensure_sqlite_db_parent_exists(app.config.get("SQLALCHEMY_DATABASE_URI", ""))

    # Initialize extensions
    db.init_app(app)
    # Answer with a literal "*" rather than echoing the caller's Origin
    CORS(app, origins=app.config["CORS_ORIGINS"], send_wildcard=True)

    from apiserver.service import SqlAlchemyTaskService

    if task_service is None:
        task_service = SqlAlchemyTaskService(db)
    app.extensions["task_service"] = task_service
    logger.info(f"Using task service: {type(task_service).__name__}")

    # Register blueprints
    from apiserver.routes.api import api_bp

    app.register_blueprint(api_bp)

    # Create database tables
    with app.app_context():
        db.create_all()
        logger.info("Database tables created")

    return app
