# todo_api/infra/jwt/flask_jwt_token_verifier.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast

from flask import current_app
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from todo_api.services._shared.errors import AUTH_INVALID, AUTH_MISSING, AuthError
from todo_api.services._shared.ports import TokenVerifier, principal_from_claims
from todo_api.services.auth.dto import Principal


@dataclass(slots=True)
class JWTTokenVerifier(TokenVerifier):
    """
    Adapter verifying client-minted HS256 tokens through Flask-JWT-Extended.

    Signature, algorithm, ``exp``/``nbf`` and the presence of the identity
    claim (``JWT_IDENTITY_CLAIM``) are checked by the library against the
    single ``JWT_SECRET_KEY``. Every failure collapses into
    ``AuthError("invalid")`` so a foreign-secret token cannot be told apart
    from a malformed one.

    .. note::
       Requires an active Flask app context with the JWT settings loaded.

    :param require_expiration: Reject tokens without an ``exp`` claim.
    """

    require_expiration: bool = True

    def decode(self, token: str) -> dict[str, Any]:
        from flask_jwt_extended import decode_token

        return cast(dict[str, Any], decode_token(token))

    def verify(self, raw_token: str | None) -> Principal:
        if raw_token is None or not raw_token.strip():
            raise AuthError(AUTH_MISSING)

        try:
            claims = self.decode(raw_token.strip())
        except (PyJWTError, JWTExtendedException) as exc:
            raise AuthError(AUTH_INVALID) from exc

        if self.require_expiration and "exp" not in claims:
            raise AuthError(AUTH_INVALID)

        identity_claim = current_app.config.get("JWT_IDENTITY_CLAIM", "id")
        return principal_from_claims(claims, identity_claim=identity_claim)
