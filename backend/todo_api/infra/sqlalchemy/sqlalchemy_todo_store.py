# todo_api/infra/sqlalchemy/sqlalchemy_todo_store.py
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from todo_api.models.todo import Todo
from todo_api.services._shared.errors import NotFoundError
from todo_api.services._shared.ids import is_storable_id
from todo_api.services._shared.ports import TodoStore
from todo_api.services.todos.dto import TodoOut
from todo_api.uow.sqlalchemy_uow import SQLAlchemyUnitOfWork


def _to_dto(todo: Todo) -> TodoOut:
    return TodoOut(id=todo.id, content=todo.content, owner_id=todo.owner_id)


@dataclass(slots=True)
class SQLAlchemyTodoStore(TodoStore):
    """
    Relational todo store.

    Ids come from the table's autoincrement primary key, so uniqueness under
    concurrent inserts is guaranteed by the database. Each operation runs in
    its own Unit of Work and content only ever travels as a bound parameter.

    .. note::
       Requires an active Flask app context (the UoW uses ``db.session``).

    :param uow_factory: Callable returning a fresh Unit of Work.
    """

    uow_factory: Callable[[], SQLAlchemyUnitOfWork] = field(default=SQLAlchemyUnitOfWork)

    def create(self, owner_id: int, content: str) -> TodoOut:
        with self.uow_factory() as uow:
            todo = uow.todos.add(Todo(content=content, owner_id=owner_id))
            created = _to_dto(todo)
        return created

    def list_by_owner(self, owner_id: int) -> list[TodoOut]:
        with self.uow_factory() as uow:
            return [_to_dto(t) for t in uow.todos.list_by_owner(owner_id)]

    def delete_one(self, todo_id: int, owner_id: int) -> None:
        # No row can hold an id the driver refuses to bind
        if not is_storable_id(todo_id):
            raise NotFoundError("Todo", todo_id)
        # Single DELETE ... WHERE id AND owner_id: check and removal are atomic
        with self.uow_factory() as uow:
            removed = uow.todos.delete_where(id=todo_id, owner_id=owner_id)
        if removed == 0:
            raise NotFoundError("Todo", todo_id)

    def delete_all_by_owner(self, owner_id: int) -> int:
        with self.uow_factory() as uow:
            return uow.todos.delete_by_owner(owner_id)

    def count(self) -> int:
        with self.uow_factory() as uow:
            return uow.todos.count()
