"""Repository package exposing persistence-layer access for domain models."""

from __future__ import annotations

from todo_api.repositories.base import BaseRepository
from todo_api.repositories.todo import TodoRepository

__all__ = [
    "BaseRepository",
    "TodoRepository",
]
