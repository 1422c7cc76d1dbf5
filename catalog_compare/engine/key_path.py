"""
Dot-notation key path helpers.

Paths address a node from the document root, e.g. ``"app.title"``.
Segments are assumed to be sanitized by the loader (no empty or
dangerous names), so the helpers here never validate them.
"""

from __future__ import annotations

from typing import Any, Iterable

from catalog_compare.engine.models import ABSENT

SEPARATOR = "."


def encode(segments: Iterable[Any]) -> str:
    """Join segments into a dotted path, dropping empty ones.

    Examples:
        >>> encode(["app", "title"])
        'app.title'
        >>> encode(["app", "", "title"])
        'app.title'
    """
    return SEPARATOR.join(str(s) for s in segments if s is not None and s != "")


def decode(path: Any) -> list[str]:
    """Split a dotted path into segments, dropping empty ones.

    Examples:
        >>> decode("a..b")
        ['a', 'b']
        >>> decode("")
        []
    """
    if not path or not isinstance(path, str):
        return []
    return [segment for segment in path.split(SEPARATOR) if segment]


def child_path(prefix: str, key: str) -> str:
    """Return the path of ``key`` below ``prefix``."""
    return f"{prefix}{SEPARATOR}{key}" if prefix else key


def read(doc: Any, path: str) -> Any:
    """Read the value at ``path``.

    Returns ABSENT if any intermediate is not a container, a key is
    missing, or the path is empty (the whole document is never returned).
    """
    segments = decode(path)
    if not segments:
        return ABSENT

    current = doc
    for segment in segments:
        if not isinstance(current, dict) or segment not in current:
            return ABSENT
        current = current[segment]
    return current


def write(doc: dict[str, Any], path: str, value: Any) -> None:
    """Set ``value`` at ``path``, mutating ``doc`` in place.

    Missing intermediates are created as containers. A non-container
    intermediate is overwritten with an empty container. An empty path
    is a no-op.
    """
    segments = decode(path)
    if not segments or not isinstance(doc, dict):
        return

    current = doc
    for segment in segments[:-1]:
        if not isinstance(current.get(segment), dict):
            current[segment] = {}
        current = current[segment]
    current[segments[-1]] = value


def remove(doc: dict[str, Any], path: str) -> bool:
    """Delete the key at ``path``. Returns True if something was removed."""
    segments = decode(path)
    if not segments:
        return False

    parent = read(doc, encode(segments[:-1])) if len(segments) > 1 else doc
    if not isinstance(parent, dict) or segments[-1] not in parent:
        return False
    del parent[segments[-1]]
    return True
