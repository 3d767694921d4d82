"""Factory Boy definition for :class:`todo_api.models.todo.Todo`."""

from __future__ import annotations

import factory
from todo_api.models.todo import Todo

from tests.factories import BaseFactory


class TodoFactory(BaseFactory):
    """Build persisted :class:`todo_api.models.todo.Todo` rows."""

    class Meta:
        model = Todo

    id = None  # let autoincrement handle it
    content = factory.Faker("sentence", nb_words=4)
    owner_id = 1
