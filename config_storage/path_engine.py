"""
Dotted-key traversal over a nested JSON document.

A document is a ``dict`` whose values are JSON scalars, lists or nested
dicts. Only dicts are containers: lists are stored and returned as opaque
leaf values. A path is the list of segments produced by ``split_key``.

Absence is reported with the ``MISSING`` sentinel so a stored ``None`` and
a missing key can be told apart by callers that care; ``get_path`` treats
a stored ``None`` as missing.
"""

from __future__ import annotations

from typing import Any, Final, Sequence

from .errors import InvalidKeyError

SEPARATOR: Final = "."


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def validate_key(key: Any) -> None:
    if not isinstance(key, str):
        raise InvalidKeyError(key, "key must be a string")
    if not key:
        raise InvalidKeyError(key, "key must not be empty")
    if key.startswith(SEPARATOR) or key.endswith(SEPARATOR):
        raise InvalidKeyError(key, f"key must not start or end with {SEPARATOR!r}")
    if not all(key.split(SEPARATOR)):
        raise InvalidKeyError(key, "key must not contain empty segments")


def split_key(key: Any) -> list[str]:
    validate_key(key)
    return key.split(SEPARATOR)


def get_path(path: Sequence[str], node: Any) -> Any:
    """Return the value at ``path`` or ``MISSING``."""
    head, rest = path[0], path[1:]
    if not isinstance(node, dict):
        return MISSING
    child = node.get(head)
    if child is None:
        return MISSING
    if rest:
        return get_path(rest, child)
    return child


def set_path(path: Sequence[str], node: dict[str, Any], value: Any) -> None:
    """
    Assign ``value`` at ``path``.

    Intermediate dicts are kept; anything else in the way (scalar, list,
    None) is replaced by a fresh dict. The terminal assignment overwrites
    whatever was there, subtree included.
    """
    head, rest = path[0], path[1:]
    if not rest:
        node[head] = value
        return
    child = node.get(head)
    if not isinstance(child, dict):
        child = {}
        node[head] = child
    set_path(rest, child, value)


def delete_path(path: Sequence[str], node: dict[str, Any]) -> None:
    head, rest = path[0], path[1:]
    if not rest:
        node.pop(head, None)
        return
    child = node.get(head)
    if not isinstance(child, dict):
        # nothing to delete below a non-container
        return
    delete_path(rest, child)


def exists_path(path: Sequence[str], node: dict[str, Any]) -> bool:
    head, rest = path[0], path[1:]
    if head not in node:
        return False
    child = node[head]
    if not rest:
        return child is not None
    if not isinstance(child, dict):
        return False
    return exists_path(rest, child)
