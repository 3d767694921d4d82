"""
todo_api.services._shared.ports
===============================

Collection of *ports* (hexagonal interfaces) that define the contracts the
service layer depends on.

Modules
-------
- :mod:`token_verifier`:
    Defines :class:`~.TokenVerifier`, the abstraction for bearer token
    verification, plus :class:`~.StubTokenVerifier` for unit tests.

- :mod:`todo_store`:
    Defines :class:`~.TodoStore` and the process-local
    :class:`~.InMemoryTodoStore`.

Design Notes
------------
Concrete adapters backed by external systems (JWT library, relational
database) implement these interfaces under ``todo_api.infra``.
"""

from __future__ import annotations

from .todo_store import InMemoryTodoStore, TodoStore
from .token_verifier import StubTokenVerifier, TokenVerifier, principal_from_claims

__all__ = [
    "TokenVerifier",
    "StubTokenVerifier",
    "principal_from_claims",
    "TodoStore",
    "InMemoryTodoStore",
]
