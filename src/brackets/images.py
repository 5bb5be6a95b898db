"""Absolute image URL resolution against the configured base URL."""

from __future__ import annotations

ABSOLUTE_PREFIXES = ("http://", "https://")


def is_absolute_url(path: str) -> bool:
    return path.lower().startswith(ABSOLUTE_PREFIXES)


def resolve_image_url(path: str | None, base_url: str) -> str | None:
    """Return ``path`` as an absolute URL.

    Absolute http(s) URLs are returned unchanged, so resolving twice is a
    no-op. Relative paths lose at most one leading slash and are joined to the
    base URL with a single ``/``.
    """
    if path is None:
        return None
    if is_absolute_url(path):
        return path
    relative = path[1:] if path.startswith("/") else path
    return f"{base_url.rstrip('/')}/{relative}"
