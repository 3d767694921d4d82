"""Pytest fixtures for the todo API.

Two applications are built per test session:

- ``app`` uses the in-memory todo store, reset before every test;
- ``sql_app`` uses the SQLAlchemy store against an in-memory SQLite database
  where each test runs inside a transaction that is rolled back afterwards.
"""

from __future__ import annotations

import os

import pytest
from sqlalchemy import event
from sqlalchemy.orm import scoped_session, sessionmaker
from todo_api.core.config import TestingConfig
from todo_api.core.extensions import STORE_EXTENSION_KEY
from todo_api.core.extensions import db as _db  # Flask-SQLAlchemy instance
from todo_api.factory import create_app  # application factory under test
from todo_api.services._shared.ports import InMemoryTodoStore

from tests.helpers.auth import TEST_SECRET, auth_headers, issue_token


class TestConfig(TestingConfig):
    """Testing configuration for the in-memory application.

    Notes
    -----
    - Pins the JWT secret the helpers sign with.
    - Avoids touching the filesystem (no instance config, no schema creation).
    """

    JWT_SECRET_KEY = TEST_SECRET
    TODO_STORE_BACKEND = "memory"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    CREATE_SCHEMA_ON_STARTUP = False
    LOG_LEVEL = "WARNING"


class SQLTestConfig(TestConfig):
    """Testing configuration selecting the SQLAlchemy todo store."""

    TODO_STORE_BACKEND = "sqlalchemy"


# --------------------------------------------------------------------------- #
# In-memory application
# --------------------------------------------------------------------------- #


@pytest.fixture(scope="session")
def app():
    """Create the Flask application backed by the in-memory store."""
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    return create_app(TestConfig, instance_relative_config=False)


@pytest.fixture()
def store(app) -> InMemoryTodoStore:
    """Install a fresh in-memory store so tests never share todos."""
    fresh = InMemoryTodoStore()
    app.extensions[STORE_EXTENSION_KEY] = fresh
    return fresh


@pytest.fixture()
def client(app, store):
    """Return a Flask test client bound to a clean store."""
    return app.test_client()


@pytest.fixture()
def user_id() -> int:
    """Identity encoded in the default test token."""
    return 1


@pytest.fixture()
def auth_token(user_id: int) -> str:
    """Valid token for ``user_id`` signed with the configured secret."""
    return issue_token(user_id)


@pytest.fixture()
def auth_header(auth_token: str) -> dict[str, str]:
    """Authorization header for authenticated requests."""
    return auth_headers(auth_token)


# --------------------------------------------------------------------------- #
# SQLAlchemy application
# --------------------------------------------------------------------------- #


def _enable_sqlite_savepoints(engine) -> None:
    """Let SQLAlchemy own BEGIN so SAVEPOINTs nest inside the test transaction.

    pysqlite defers BEGIN until the first DML statement, which turns a
    released SAVEPOINT into a real commit.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _do_begin(conn):
        conn.exec_driver_sql("BEGIN")


@pytest.fixture(scope="session")
def sql_app():
    """Create the Flask application backed by the SQLAlchemy store."""
    os.environ.pop("DATABASE_URL", None)
    return create_app(SQLTestConfig, instance_relative_config=False)


@pytest.fixture(scope="session")
def db(sql_app):
    """Create database tables once per test session.

    Yields
    ------
    flask_sqlalchemy.SQLAlchemy
        Database extension bound to the SQL testing application.
    """
    with sql_app.app_context():
        _enable_sqlite_savepoints(_db.engine)
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="session")
def connection(db):
    """Keep a dedicated DBAPI connection open for the whole session."""
    conn = db.engine.connect()
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture()
def session(db, connection):
    """Provide a SQLAlchemy session wrapped in an outer transaction.

    The session joins the connection's transaction through SAVEPOINTs, so
    ``commit()`` calls made by the Unit of Work never reach the database and
    the outer transaction is rolled back after each test.
    """
    top_trans = connection.begin()
    factory = sessionmaker(bind=connection, join_transaction_mode="create_savepoint")
    scoped = scoped_session(factory)

    # Monkey-patch db.session so application code uses this scoped session
    original_session = db.session
    db.session.remove()
    db.session = scoped

    try:
        yield scoped
    finally:
        scoped.remove()
        db.session = original_session
        top_trans.rollback()


@pytest.fixture()
def factories_session(session):
    """Wire Factory Boy's session helper to the transactional session fixture."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(session)
    yield session
    SQLAlchemySession.set(None)


@pytest.fixture()
def sql_client(sql_app, session):
    """Test client for the SQL application sharing the transactional session."""
    return sql_app.test_client()


@pytest.fixture()
def file_sql_app(tmp_path):
    """SQL application on a file database with its own connection pool.

    Threads each check out their own connection here, which the shared
    in-memory engine used by ``sql_app`` cannot offer.
    """

    class FileSQLConfig(SQLTestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'todos.db'}"
        CREATE_SCHEMA_ON_STARTUP = True

    app = create_app(FileSQLConfig, instance_relative_config=False)
    yield app
    with app.app_context():
        _db.engine.dispose()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk
