"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from todo_api.api.deps import json_response, timing
from todo_api.core.extensions import get_todo_store

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application and store health information."""

    store_status = "ok"
    todos: int | None = None
    try:
        todos = get_todo_store().count()
    except Exception:  # pragma: no cover - depends on DB backend
        current_app.logger.exception("healthcheck.store_error")
        store_status = "fail"
    payload = {
        "status": "ok" if store_status == "ok" else "degraded",
        "store": current_app.config.get("TODO_STORE_BACKEND", "memory"),
        "store_status": store_status,
        "todos": todos,
        "version": current_app.config["APP_VERSION"],
    }
    return json_response(payload)
