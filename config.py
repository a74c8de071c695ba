"""
Application configuration module.

Each environment is a class; ``get_config`` picks one by name. Only the
database location and the allowed CORS origins vary, and both can be
overridden through environment variables.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
INSTANCE_DIR = BASE_DIR / "instance"


def _split_origins(raw: str) -> list[str] | str:
    """Turn a comma-separated origin list into what Flask-CORS expects."""
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    if not origins or origins == ["*"]:
        return "*"
    return origins


class Config:
    """Settings shared by every environment."""

    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL", f"sqlite:///{INSTANCE_DIR / 'tasks.db'}"
    )

    # Comma-separated; "*" lets any origin call the API
    CORS_ORIGINS: list[str] | str = _split_origins(os.environ.get("CORS_ORIGINS", "*"))


class DevelopmentConfig(Config):
    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Points at its own database file so tests never touch development data."""

    DEBUG: bool = True
    TESTING: bool = True
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "TEST_DATABASE_URL", f"sqlite:///{INSTANCE_DIR / 'test_tasks.db'}"
    )


class ProductionConfig(Config):
    DEBUG: bool = False
    TESTING: bool = False


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Return the configuration class for ``env``.

    Falls back to ``FLASK_ENV`` when ``env`` is None, and to the
    development settings for unknown names.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
