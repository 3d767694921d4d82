"""Todo endpoints."""

from __future__ import annotations

from flask import Blueprint, request

from todo_api.api.deps import get_todo_service, json_response, require_principal, timing
from todo_api.schemas import DeleteResultSchema, TodoCreateSchema, TodoSchema
from todo_api.services.auth.dto import Principal

bp = Blueprint("todos", __name__)

todo_schema = TodoSchema()
todo_list_schema = TodoSchema(many=True)
todo_create_schema = TodoCreateSchema()
delete_result_schema = DeleteResultSchema()


@bp.post("")
@require_principal
@timing
def create_todo(*, principal: Principal):
    """Create a todo owned by the caller and return it."""

    payload = todo_create_schema.load(request.get_json(silent=True) or {})
    todo = get_todo_service().create_for(principal, payload["content"])
    return json_response(todo_schema.dump(todo))


@bp.get("")
@require_principal
@timing
def list_todos(*, principal: Principal):
    """Return the caller's todos in creation order (possibly empty)."""

    todos = get_todo_service().list_for(principal)
    return json_response(todo_list_schema.dump(todos))


@bp.delete("/<int(signed=True):todo_id>")
@require_principal
@timing
def delete_todo(todo_id: int, *, principal: Principal):
    """Delete one of the caller's todos; unknown ids succeed as well."""

    get_todo_service().delete_one_for(principal, todo_id)
    return json_response(delete_result_schema.dump({"message": "Todo deleted", "id": todo_id}))


@bp.delete("")
@require_principal
@timing
def delete_all_todos(*, principal: Principal):
    """Delete every todo of the caller and report how many were removed."""

    removed = get_todo_service().delete_all_for(principal)
    return json_response(delete_result_schema.dump({"message": "Todos deleted", "deleted": removed}))
