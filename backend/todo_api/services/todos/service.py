"""
TodoService
===========

Application service for per-user todos:

- verify the caller's bearer token (auth errors always win),
- validate content on writes,
- delegate storage to a :class:`TodoStore` scoped to the caller's id.

Token-facing operations (``create``, ``list``, ``delete_one``,
``delete_all``) verify first. The ``*_for`` twins take a :class:`Principal`
that the HTTP boundary has already verified.
"""

from __future__ import annotations

import logging

from todo_api.services._shared.base import BaseService, ServiceContext
from todo_api.services._shared.errors import AuthError, NotFoundError
from todo_api.services._shared.ports import TodoStore, TokenVerifier
from todo_api.services.auth.dto import Principal
from todo_api.services.todos.dto import TodoOut
from todo_api.services.todos.validation import validate_content

log = logging.getLogger(__name__)


class TodoService(BaseService):
    """
    Orchestrates verifier, validator and store into the four todo operations.

    Nothing reaches the store when verification or validation fails.
    """

    def __init__(
        self,
        *,
        store: TodoStore,
        verifier: TokenVerifier,
        ctx: ServiceContext | None = None,
    ) -> None:
        """
        :param store: Todo storage adapter.
        :param verifier: Bearer token verifier.
        :param ctx: Optional request-scoped context.
        """
        super().__init__(ctx=ctx)
        self.store = store
        self.verifier = verifier

    # --------------------------------------------------------------------- #
    # Authentication
    # --------------------------------------------------------------------- #

    def authenticate(self, token: str | None) -> Principal:
        """
        Verify ``token`` and return the caller.

        :raises AuthError: When the token is missing or invalid.
        """
        try:
            return self.verifier.verify(token)
        except AuthError as exc:
            log.warning("auth.rejected", extra={"reason": exc.reason})
            raise

    # --------------------------------------------------------------------- #
    # Token-facing operations
    # --------------------------------------------------------------------- #

    def create(self, token: str | None, content: str | None) -> TodoOut:
        """Verify, validate and store a new todo for the caller."""
        return self.create_for(self.authenticate(token), content)

    def list(self, token: str | None) -> list[TodoOut]:
        """Verify and return the caller's todos."""
        return self.list_for(self.authenticate(token))

    def delete_one(self, token: str | None, todo_id: int) -> None:
        """Verify and delete one of the caller's todos (idempotent)."""
        self.delete_one_for(self.authenticate(token), todo_id)

    def delete_all(self, token: str | None) -> int:
        """Verify and delete every todo of the caller (idempotent)."""
        return self.delete_all_for(self.authenticate(token))

    # --------------------------------------------------------------------- #
    # Principal-facing operations
    # --------------------------------------------------------------------- #

    def create_for(self, principal: Principal, content: str | None) -> TodoOut:
        """
        Store ``content`` for ``principal``.

        :param principal: Verified caller; becomes the immutable owner.
        :param content: Raw content, stored verbatim once accepted.
        :returns: The stored todo with its freshly issued id.
        :raises ValidationError: When content is empty or whitespace only.
        """
        accepted = validate_content(content)
        todo = self.store.create(principal.id, accepted)
        log.info("todo.created", extra={"todo_id": todo.id, "owner_id": principal.id})
        return todo

    def list_for(self, principal: Principal) -> list[TodoOut]:
        """Return ``principal``'s todos in insertion order; never ``None``."""
        return self.store.list_by_owner(principal.id)

    def delete_one_for(self, principal: Principal, todo_id: int) -> None:
        """
        Delete ``todo_id`` when ``principal`` owns it.

        Absent ids and ids owned by someone else are absorbed: the outcome is
        the same success, and the caller's list no longer contains the id.
        """
        try:
            self.store.delete_one(todo_id, principal.id)
        except NotFoundError:
            log.debug("todo.delete_missing", extra={"todo_id": todo_id, "owner_id": principal.id})
            return
        log.info("todo.deleted", extra={"todo_id": todo_id, "owner_id": principal.id})

    def delete_all_for(self, principal: Principal) -> int:
        """Delete every todo of ``principal``. :returns: number removed."""
        removed = self.store.delete_all_by_owner(principal.id)
        log.info("todos.deleted_all", extra={"owner_id": principal.id, "deleted": removed})
        return removed
