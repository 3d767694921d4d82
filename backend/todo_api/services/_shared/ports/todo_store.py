from __future__ import annotations

import threading
from typing import Protocol

from todo_api.services._shared.errors import NotFoundError
from todo_api.services.todos.dto import TodoOut


class TodoStore(Protocol):
    """
    Concurrency-safe collection of todos keyed by id with a per-owner index.

    Id allocation and the insert of the record MUST be one atomic step, so N
    concurrent ``create`` calls always yield N distinct ids and N records.
    Implementations never build statements from user content.
    """

    def create(self, owner_id: int, content: str) -> TodoOut:
        """Allocate a fresh id, store ``content`` for ``owner_id`` and return it."""
        ...

    def list_by_owner(self, owner_id: int) -> list[TodoOut]:
        """Return the owner's todos in insertion order (``[]`` when none)."""
        ...

    def delete_one(self, todo_id: int, owner_id: int) -> None:
        """
        Remove ``todo_id`` when it exists and belongs to ``owner_id``.

        :raises NotFoundError: When no such record is owned by ``owner_id``.
        """
        ...

    def delete_all_by_owner(self, owner_id: int) -> int:
        """Remove every todo of ``owner_id``. :returns: number removed."""
        ...

    def count(self) -> int:
        """Return the number of stored todos across all owners."""
        ...


class InMemoryTodoStore(TodoStore):
    """
    Process-local todo store.

    .. note::
       A single lock guards the id counter, the record mapping and the owner
       index. Reads take the same lock, so a list issued after a completed
       ``delete_all_by_owner`` never observes removed records.
    """

    def __init__(self, *, first_id: int = 1) -> None:
        self._todos: dict[int, TodoOut] = {}
        # owner -> ordered set of ids (dict keys keep insertion order)
        self._by_owner: dict[int, dict[int, None]] = {}
        self._next_id = first_id
        self._lock = threading.Lock()

    def create(self, owner_id: int, content: str) -> TodoOut:
        with self._lock:
            todo_id = self._next_id
            self._next_id += 1
            todo = TodoOut(id=todo_id, content=content, owner_id=owner_id)
            self._todos[todo_id] = todo
            self._by_owner.setdefault(owner_id, {})[todo_id] = None
            return todo

    def list_by_owner(self, owner_id: int) -> list[TodoOut]:
        with self._lock:
            return [self._todos[i] for i in self._by_owner.get(owner_id, {})]

    def delete_one(self, todo_id: int, owner_id: int) -> None:
        with self._lock:
            todo = self._todos.get(todo_id)
            if todo is None or todo.owner_id != owner_id:
                raise NotFoundError("Todo", todo_id)
            del self._todos[todo_id]
            owned = self._by_owner[owner_id]
            del owned[todo_id]
            if not owned:
                del self._by_owner[owner_id]

    def delete_all_by_owner(self, owner_id: int) -> int:
        with self._lock:
            owned = self._by_owner.pop(owner_id, {})
            for todo_id in owned:
                del self._todos[todo_id]
            return len(owned)

    def count(self) -> int:
        with self._lock:
            return len(self._todos)
