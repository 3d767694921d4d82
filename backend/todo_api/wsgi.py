"""WSGI entry point (``gunicorn todo_api.wsgi:app``)."""

from __future__ import annotations

from todo_api import create_app

app = create_app()
