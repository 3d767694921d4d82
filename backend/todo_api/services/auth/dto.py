"""
DTOs for authentication.

The :class:`Principal` is built exactly once, when a bearer token is
verified, and then passed explicitly down the call chain.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Verified caller identity.

    :param id: Numeric user identifier (owner of the caller's todos).
    :type id: int
    :param username: Display name from the token, ``""`` when absent.
    :type username: str
    :param role: Role claim from the token, ``""`` when absent.
    :type role: str
    """

    id: int
    username: str = ""
    role: str = ""
