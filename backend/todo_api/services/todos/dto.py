"""
DTOs for TodoService.

Stores return :class:`TodoOut` records so the service layer never sees ORM
instances.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TodoOut:
    """
    Output DTO representing a stored todo.

    :param id: Store-issued identifier, unique for the store's lifetime.
    :type id: int
    :param content: Verbatim content as submitted.
    :type content: str
    :param owner_id: Identifier of the principal that created the todo.
    :type owner_id: int
    """

    id: int
    content: str
    owner_id: int
