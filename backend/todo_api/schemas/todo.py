"""Todo-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields


class TodoCreateSchema(Schema):
    """Input payload for creating a todo.

    ``content`` may be missing or ``null``; emptiness is judged by the
    service so every empty form yields the same 400 response. A non-string
    value fails schema validation.
    """

    class Meta:
        unknown = EXCLUDE

    content = fields.String(load_default=None, allow_none=True)


class TodoSchema(Schema):
    """Response payload for a stored todo."""

    id = fields.Integer(required=True)
    content = fields.String(required=True)
    owner_id = fields.Integer(required=True, data_key="userId")


class DeleteResultSchema(Schema):
    """Response payload acknowledging a delete."""

    message = fields.String(required=True)
    id = fields.Integer()
    deleted = fields.Integer()
