from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from todo_api.services._shared.errors import AUTH_INVALID, AUTH_MISSING, AuthError
from todo_api.services._shared.ids import is_storable_id
from todo_api.services.auth.dto import Principal


class TokenVerifier(Protocol):
    """Port for turning a raw bearer credential into a :class:`Principal`."""

    def verify(self, raw_token: str | None) -> Principal:
        """
        Validate ``raw_token`` and extract the caller identity.

        :raises AuthError: ``missing`` when no token was presented,
            ``invalid`` for any signature, structure or expiry failure.
        """
        ...


def principal_from_claims(claims: Mapping[str, Any], *, identity_claim: str = "id") -> Principal:
    """
    Build a :class:`Principal` from already verified claims.

    The identity claim must be an integer; digit-only strings are accepted
    and converted. Booleans are rejected even though they subclass ``int``,
    and so are ids outside the signed 64-bit range.

    :param claims: Decoded token payload.
    :param identity_claim: Name of the claim holding the user id.
    :raises AuthError: ``invalid`` when the identity is absent, not numeric
        or out of range.
    """
    raw_id = claims.get(identity_claim)
    if isinstance(raw_id, bool):
        raise AuthError(AUTH_INVALID)
    if isinstance(raw_id, int):
        user_id = raw_id
    elif isinstance(raw_id, str) and raw_id.strip().isdigit():
        user_id = int(raw_id.strip())
    else:
        raise AuthError(AUTH_INVALID)
    if not is_storable_id(user_id):
        raise AuthError(AUTH_INVALID)

    username = claims.get("username")
    role = claims.get("role")
    return Principal(
        id=user_id,
        username=username if isinstance(username, str) else "",
        role=role if isinstance(role, str) else "",
    )


class StubTokenVerifier(TokenVerifier):
    """Deterministic token verifier used in unit tests."""

    def __init__(self) -> None:
        self._seq = 0
        self._issued: dict[str, dict[str, Any]] = {}

    def issue(self, user_id: int, *, username: str = "", role: str = "") -> str:
        """Register a token for ``user_id`` and return its opaque value."""
        self._seq += 1
        token = f"stub.{user_id}.{self._seq}"
        claims: dict[str, Any] = {"id": user_id}
        if username:
            claims["username"] = username
        if role:
            claims["role"] = role
        self._issued[token] = claims
        return token

    def verify(self, raw_token: str | None) -> Principal:
        if not raw_token:
            raise AuthError(AUTH_MISSING)
        claims = self._issued.get(raw_token)
        if claims is None:
            raise AuthError(AUTH_INVALID)
        return principal_from_claims(claims)
