"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP directly. They serve as stable contracts between stores,
verifiers and application services.

The translation to HTTP responses (RFC 7807) is handled by
``todo_api/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

# --------------------------------------------------------------------------- #
# Reason codes
# --------------------------------------------------------------------------- #

AUTH_MISSING: Final[str] = "missing"
AUTH_INVALID: Final[str] = "invalid"
CONTENT_EMPTY: Final[str] = "empty"

EMPTY_CONTENT_MESSAGE: Final[str] = "Content cannot be empty"


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The API layer translates them through ``BaseService``.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in a store.

    :param entity: Entity name (e.g., "Todo").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class AuthError(ServiceError):
    """
    Raised when a bearer credential cannot be turned into a principal.

    :param reason: ``"missing"`` when no token was presented, ``"invalid"``
        for bad signatures, malformed or expired tokens.
    :type reason: str
    """

    reason: str = AUTH_INVALID

    def __str__(self) -> str:
        return f"Authentication failed: {self.reason}"


@dataclass(slots=True)
class ValidationError(ServiceError):
    """
    Raised when todo content is rejected before reaching the store.

    :param reason: Machine-readable reason (``"empty"``).
    :type reason: str
    :param message: Client-safe message.
    :type message: str
    """

    reason: str = CONTENT_EMPTY
    message: str = EMPTY_CONTENT_MESSAGE

    def __str__(self) -> str:
        return self.message
