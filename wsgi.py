"""WSGI entry point for the task API."""

import os

from apiserver import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))
