"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, g, jsonify, request

from todo_api.core.errors import Unauthorized
from todo_api.core.extensions import get_todo_store, get_token_verifier
from todo_api.core.logger import ensure_request_id
from todo_api.services._shared.base import ServiceContext
from todo_api.services._shared.errors import AUTH_INVALID, AuthError
from todo_api.services.todos.service import TodoService

F = TypeVar("F", bound=Callable[..., Any])

log = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def bearer_token_from_request() -> str | None:
    """Extract the bearer credential from the ``Authorization`` header.

    :returns: The raw token, or ``None`` when the header is absent or carries
        the scheme without a credential.
    :raises AuthError: ``invalid`` when another scheme is used.
    """

    header = request.headers.get("Authorization", "").strip()
    if not header:
        return None
    scheme, _, credential = header.partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        raise AuthError(AUTH_INVALID)
    return credential.strip() or None


def require_principal(func: F) -> F:
    """Verify the bearer token before the view runs.

    On success the :class:`~todo_api.services.auth.dto.Principal` is stored on
    ``flask.g.principal`` and passed to the view as the ``principal`` keyword.
    Any verification failure ends the request with 401 ``invalid token``;
    missing and invalid tokens are not distinguished.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        try:
            principal = get_token_verifier().verify(bearer_token_from_request())
        except AuthError as exc:
            log.warning("auth.rejected", extra={"reason": exc.reason})
            raise Unauthorized() from exc
        g.principal = principal
        return func(*args, principal=principal, **kwargs)

    return wrapper  # type: ignore[return-value]


def get_todo_service() -> TodoService:
    """Build a :class:`TodoService` bound to the application's store and verifier."""

    return TodoService(
        store=get_todo_store(),
        verifier=get_token_verifier(),
        ctx=ServiceContext(request_id=ensure_request_id()),
    )


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
