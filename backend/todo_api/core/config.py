"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

STORE_BACKENDS: Final[frozenset[str]] = frozenset({"memory", "sqlalchemy"})


# Loads .env during development (no-op when the file is absent)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int = 0) -> int:
    """Parse an integer from an environment variable, falling back to ``default``."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    APP_VERSION: str
        Release identifier reported by ``/health``.
    API_BASE_PREFIX: str
        Root path for registering API blueprints. Empty by default so the
        todo resource is served at ``/todos``.
    SECRET_KEY: str
        Flask secret used for session signing.
    JWT_SECRET_KEY: str
        Shared secret every bearer token must be signed with.
    JWT_ALGORITHM: str
        Signature algorithm accepted by the verifier.
    JWT_IDENTITY_CLAIM: str
        Claim carrying the numeric user id (``id`` for client-minted tokens).
    JWT_DECODE_LEEWAY: int
        Clock skew tolerance in seconds applied to ``exp``/``nbf``.
    JWT_REQUIRE_EXPIRATION: bool
        Reject tokens that carry no ``exp`` claim.
    TODO_STORE_BACKEND: str
        ``"memory"`` or ``"sqlalchemy"``; selects the todo store adapter.
    SQLALCHEMY_DATABASE_URI: str
        Database connection string consumed by SQLAlchemy.
    CREATE_SCHEMA_ON_STARTUP: bool
        Create missing tables at boot when the SQL store is selected.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
    API_BASE_PREFIX = os.getenv("API_BASE_PREFIX", "")

    # Secrets / security
    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "CHANGE_ME_JWT")
    JWT_ALGORITHM = "HS256"
    JWT_IDENTITY_CLAIM = "id"
    JWT_DECODE_LEEWAY = env_int("JWT_DECODE_LEEWAY", 0)
    JWT_REQUIRE_EXPIRATION = env_bool("JWT_REQUIRE_EXPIRATION", True)

    # Storage
    TODO_STORE_BACKEND = os.getenv("TODO_STORE_BACKEND", "sqlalchemy")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///./todos.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)
    CREATE_SCHEMA_ON_STARTUP = env_bool("CREATE_SCHEMA_ON_STARTUP", True)

    # Flask
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    CORS_MAX_AGE = 600

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode by default and honors ``SQLALCHEMY_ECHO`` for verbose
    SQL logging when requested.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Uses the in-memory todo store unless ``TODO_STORE_BACKEND`` is set.
    - Uses an in-memory SQLite database unless ``TEST_DATABASE_URL`` is set.
    """

    TESTING = True
    DEBUG = False
    JWT_SECRET_KEY = "foo"
    TODO_STORE_BACKEND = os.getenv("TODO_STORE_BACKEND", "memory")
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    CREATE_SCHEMA_ON_STARTUP = False


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Keeps debug and SQL echoing disabled while relying on WSGI-level log
    configuration for noise control.
    """

    DEBUG = False
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
