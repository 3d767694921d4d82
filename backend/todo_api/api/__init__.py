"""API blueprint package aggregating the HTTP routes."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Register related blueprints beneath a common prefix.

    Parameters
    ----------
    app:
        Application instance receiving the blueprints.
    base_prefix:
        Prefix applied to all entries. May be empty, in which case each
        blueprint mounts at its relative prefix from the root.
    entries:
        Iterable of ``(blueprint, relative_prefix)`` pairs where
        ``relative_prefix`` is appended to ``base_prefix``.
    """

    for bp, rel_prefix in entries:
        full_prefix = "/".join(
            segment for segment in [base_prefix.strip("/"), rel_prefix.strip("/")] if segment
        )
        app.register_blueprint(bp, url_prefix="/" + full_prefix if full_prefix else None)


def init_app(app: Flask) -> None:
    """Register the todo and health routes on the Flask app."""

    # Import blueprints *only here* to keep imports localized and avoid cycles.
    from .health import bp as health_bp
    from .todos import bp as todos_bp

    registry: list[tuple[Blueprint, str]] = [
        (health_bp, ""),  # -> /health
        (todos_bp, "/todos"),  # -> /todos
    ]
    register_blueprint_group(
        app, base_prefix=app.config.get("API_BASE_PREFIX", ""), entries=registry
    )


__all__ = ["init_app", "register_blueprint_group"]
