"""Generic repository base for SQLAlchemy 2.x.

This module centralizes persistence-only concerns shared by repositories:

- Equality filters restricted to a per-repository whitelist.
- Deterministic ordering by primary key.
- Bulk deletes expressed as SQLAlchemy Core statements.
- No business logic and no commit/rollback; the Unit of Work owns transactions.

Design decisions
----------------
* Every statement is built from mapped attributes and bound parameters.
  User-provided values only ever travel as parameters, never as SQL text.
* Filtering is opt-in per aggregate via ``_filterable_fields`` mapping;
  unknown keys raise instead of being silently dropped so a typo can never
  widen a delete.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar, cast

from sqlalchemy import Delete, Select, and_, delete, func, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from todo_api.core.extensions import db

E = TypeVar("E")  # SQLAlchemy mapped entity type


class BaseRepository(Generic[E]):
    """Generic, persistence-only repository for a single aggregate.

    Subclasses MUST define:

    * ``model``: the SQLAlchemy mapped class.

    Subclasses MAY override:

    * ``_filterable_fields`` to expose equality-filterable keys.

    This class NEVER opens, commits or rolls back transactions.
    """

    #: SQLAlchemy mapped model (must be set by subclasses)
    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        """Initialise the repository with an optional SQLAlchemy session.

        When no explicit session is provided the repository falls back to the
        Flask-scoped session exposed by ``todo_api.core.extensions``.

        :param session: Session shared across the Unit of Work scope.
        :type session: :class:`sqlalchemy.orm.Session` | None
        """
        self._session: Session | None = session

    # ------------------------------ Session access ---------------------------

    @property
    def session(self) -> Session:
        """Return the injected session, else the Flask-scoped one."""
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    # ------------------------------ Extensibility ----------------------------

    def _pk_attr(self) -> InstrumentedAttribute[Any] | None:
        """Return the model's primary-key attribute (``model.id``) if available."""
        return getattr(self.model, "id", None)

    def _filterable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        """Whitelist mapping of public filter keys to model attributes.

        :returns: Public key → ORM attribute mapping.
        :rtype: Mapping[str, InstrumentedAttribute]
        """
        return {}

    # ------------------------------ Internals --------------------------------

    def _where(self, filters: Mapping[str, Any] | None) -> list[Any]:
        """Translate ``filters`` into bound equality clauses.

        :param filters: Field=value mapping (equality only).
        :type filters: Mapping[str, Any] | None
        :returns: List of SQL expressions.
        :raises ValueError: On keys missing from ``_filterable_fields()``.
        """
        if not filters:
            return []
        allowed = self._filterable_fields()
        unknown = [k for k in filters if k not in allowed]
        if unknown:
            raise ValueError(f"Unknown or non-filterable fields: {unknown}")
        return [allowed[k] == v for k, v in filters.items()]

    def _ordered(self, stmt: Select[Any]) -> Select[Any]:
        """Append ascending primary-key ordering (insertion order)."""
        pk_attr = self._pk_attr()
        return stmt.order_by(pk_attr.asc()) if pk_attr is not None else stmt

    # --------------------------------- CRUD ----------------------------------

    def add(self, instance: E) -> E:
        """Stage a new entity for persistence and flush to materialize the PK.

        :param instance: New entity instance.
        :type instance: E
        :returns: The same instance after ``flush()``.
        :rtype: E
        """
        self.session.add(instance)
        self.flush()
        return instance

    def list(self, *, filters: Mapping[str, Any] | None = None) -> list[E]:
        """List entities matching ``filters`` ordered by primary key.

        :param filters: Equality filters (public keys).
        :type filters: Mapping[str, Any] | None
        :returns: List of entities.
        :rtype: list[E]
        """
        stmt: Select[Any] = select(self.model).where(*self._where(filters))
        results = self.session.execute(self._ordered(stmt)).scalars().all()
        return cast(list[E], list(results))

    def count(self, *, filters: Mapping[str, Any] | None = None) -> int:
        """Count entities matching ``filters``."""
        stmt = select(func.count()).select_from(self.model).where(*self._where(filters))
        return int(self.session.execute(stmt).scalar_one())

    def delete_where(self, **filters: Any) -> int:
        """Bulk-delete every row matching whitelisted equality ``filters``.

        Requires at least one filter; a table-wide delete is never implied.

        :returns: Number of rows removed.
        :raises ValueError: When called without filters.
        """
        clauses = self._where(filters)
        if not clauses:
            raise ValueError("delete_where() requires at least one filter.")
        stmt: Delete = delete(self.model).where(and_(*clauses))
        result = self.session.execute(stmt.execution_options(synchronize_session=False))
        return int(result.rowcount or 0)

    def flush(self) -> None:
        """Flush pending changes to the database without committing."""
        self.session.flush()
