"""Service layer public API.

Callers can import from :mod:`todo_api.services` without knowing the
internal structure.

Re-exports
----------
- Base primitives (from ``todo_api.services._shared.base``)
    * :class:`BaseService`
    * :class:`ServiceContext`

- Todo service (from ``todo_api.services.todos``)
    * :class:`TodoService`
    * DTOs: :class:`TodoOut`, :class:`Principal`
"""

from __future__ import annotations

from todo_api.services._shared.base import BaseService, ServiceContext
from todo_api.services.auth.dto import Principal
from todo_api.services.todos.dto import TodoOut
from todo_api.services.todos.service import TodoService

__all__ = [
    "BaseService",
    "ServiceContext",
    "Principal",
    "TodoOut",
    "TodoService",
]
