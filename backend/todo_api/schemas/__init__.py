"""Convenience exports for application schemas."""

from __future__ import annotations

from .todo import DeleteResultSchema, TodoCreateSchema, TodoSchema

__all__ = [
    "DeleteResultSchema",
    "TodoCreateSchema",
    "TodoSchema",
]
