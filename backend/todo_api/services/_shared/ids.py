"""Bounds for numeric identifiers (user ids and todo ids)."""

from __future__ import annotations

from typing import Final

# Signed 64-bit range: the widest integer a SQL INTEGER/BIGINT column binds
ID_MIN: Final[int] = -(2**63)
ID_MAX: Final[int] = 2**63 - 1


def is_storable_id(value: int) -> bool:
    """Return ``True`` when ``value`` fits a signed 64-bit integer column."""
    return ID_MIN <= value <= ID_MAX
