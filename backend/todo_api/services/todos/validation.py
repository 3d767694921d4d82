"""Content validation applied before a todo reaches any store.

Only emptiness is rejected. Punctuation, quotes and SQL keywords are valid
content: stores treat content as an opaque value bound as a parameter, so
there is nothing to filter.
"""

from __future__ import annotations

from todo_api.services._shared.errors import CONTENT_EMPTY, ValidationError


def validate_content(content: str | None) -> str:
    """
    Return ``content`` unchanged when it carries at least one visible character.

    :param content: Raw content from the request payload.
    :returns: The same string, untrimmed.
    :raises ValidationError: ``empty`` for ``None``, ``""`` or whitespace only.
    """
    if content is None or not content.strip():
        raise ValidationError(CONTENT_EMPTY)
    return content
