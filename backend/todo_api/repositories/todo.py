"""Todo repository for persistence-only access."""

from __future__ import annotations

from todo_api.models.todo import Todo
from todo_api.repositories.base import BaseRepository


class TodoRepository(BaseRepository[Todo]):
    """Persistence-only repository for :class:`Todo`.

    Ownership rules are applied by callers; the repository only offers
    owner-scoped lookups so they can be expressed in a single statement.
    """

    model = Todo

    def _filterable_fields(self):
        """Whitelist fields safe for equality filters."""
        return {
            "id": Todo.id,
            "owner_id": Todo.owner_id,
        }

    def list_by_owner(self, owner_id: int) -> list[Todo]:
        """Return the owner's todos ordered by id (insertion order)."""
        return self.list(filters={"owner_id": owner_id})

    def delete_by_owner(self, owner_id: int) -> int:
        """Remove every todo of ``owner_id``. :returns: rows removed."""
        return self.delete_where(owner_id=owner_id)
