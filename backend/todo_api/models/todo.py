"""Todo model definition."""

from __future__ import annotations

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin


class Todo(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Persisted todo item.

    Fields
    ------
    content : str
        Verbatim text as submitted by the owner; never interpreted.
    owner_id : int
        Numeric user id taken from the verified token. Immutable.
    created_at : datetime
        Creation timestamp (from mixin).
    """

    __tablename__ = "todos"

    content: Mapped[str] = mapped_column(Text, nullable=False)
    owner_id: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        Index("ix_todos_owner_id_id", "owner_id", "id"),
        {"sqlite_autoincrement": True},
    )
