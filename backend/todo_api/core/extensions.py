"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flask import Flask, current_app
from flask_jwt_extended import JWTManager
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

from todo_api.core.config import STORE_BACKENDS

if TYPE_CHECKING:
    from todo_api.services._shared.ports import TodoStore, TokenVerifier

log = logging.getLogger(__name__)

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
jwt = JWTManager()

STORE_EXTENSION_KEY = "todo_store"
VERIFIER_EXTENSION_KEY = "token_verifier"


def build_todo_store(app: Flask) -> TodoStore:
    """Instantiate the todo store adapter selected by ``TODO_STORE_BACKEND``.

    Parameters
    ----------
    app: flask.Flask
        Application whose configuration selects the backend.

    Raises
    ------
    RuntimeError
        When the configured backend name is unknown.
    """
    backend = str(app.config.get("TODO_STORE_BACKEND", "memory")).strip().lower()
    if backend not in STORE_BACKENDS:
        raise RuntimeError(
            f"Unknown TODO_STORE_BACKEND {backend!r}; expected one of {sorted(STORE_BACKENDS)}"
        )

    if backend == "memory":
        from todo_api.services._shared.ports import InMemoryTodoStore

        return InMemoryTodoStore()

    from todo_api.infra.sqlalchemy.sqlalchemy_todo_store import SQLAlchemyTodoStore

    if app.config.get("CREATE_SCHEMA_ON_STARTUP", False):
        with app.app_context():
            db.create_all()
    return SQLAlchemyTodoStore()


def init_app(app: Flask) -> None:
    """Initialize SQLAlchemy, JWT and the todo store.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. This call imports the
        :mod:`todo_api.models` package so SQLAlchemy metadata is complete
        before any ``create_all``.
    """
    db.init_app(app)

    # Ensure models are imported so the metadata knows every table
    from todo_api import models as _models  # noqa: F401

    jwt.init_app(app)

    from todo_api.infra.jwt.flask_jwt_token_verifier import JWTTokenVerifier

    app.extensions[VERIFIER_EXTENSION_KEY] = JWTTokenVerifier(
        require_expiration=bool(app.config.get("JWT_REQUIRE_EXPIRATION", True))
    )
    store = build_todo_store(app)
    app.extensions[STORE_EXTENSION_KEY] = store
    log.info("todo store ready: backend=%s", type(store).__name__)


def get_todo_store() -> TodoStore:
    """Return the todo store bound to the current application."""
    store = current_app.extensions.get(STORE_EXTENSION_KEY)
    if store is None:
        raise RuntimeError("Todo store is not initialized. Call init_app() first.")
    return store


def get_token_verifier() -> TokenVerifier:
    """Return the token verifier bound to the current application."""
    verifier = current_app.extensions.get(VERIFIER_EXTENSION_KEY)
    if verifier is None:
        raise RuntimeError("Token verifier is not initialized. Call init_app() first.")
    return verifier
