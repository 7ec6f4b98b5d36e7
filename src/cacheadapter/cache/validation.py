# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Guard clauses for cache keys and bulk collections."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from cacheadapter.core.exceptions import InvalidArgumentError


def validate_key(key: object) -> str | bytes:
    """Return *key* unchanged if it is a ``str`` or ``bytes``.

    Raises:
        InvalidArgumentError: For any other type.
    """
    if not isinstance(key, (str, bytes)):
        msg = f"Cache key must be a string, got {type(key).__name__}"
        raise InvalidArgumentError(msg)
    return key


def _materialize(collection: object, what: str) -> list[Any]:
    # Strings are iterable but are never a collection of keys.
    if isinstance(collection, (str, bytes)) or not isinstance(collection, Iterable):
        msg = f"{what} must be an iterable collection, got {type(collection).__name__}"
        raise InvalidArgumentError(msg)
    return list(collection)


def validate_keys(keys: object) -> list[str | bytes]:
    """Materialize *keys* into a list, validating every element.

    Generators are consumed here so nothing reaches the store until the
    whole collection is known to be valid.
    """
    return [validate_key(key) for key in _materialize(keys, "Keys")]


def validate_items(values: object) -> list[tuple[str | bytes, Any]]:
    """Normalize a mapping or an iterable of pairs into ``(key, value)`` tuples."""
    if isinstance(values, Mapping):
        pairs = list(values.items())
    else:
        pairs = _materialize(values, "Values")

    items: list[tuple[str | bytes, Any]] = []
    for pair in pairs:
        if not isinstance(pair, (tuple, list)) or len(pair) != 2:
            msg = f"Values must contain (key, value) pairs, got {pair!r}"
            raise InvalidArgumentError(msg)
        key, value = pair
        items.append((validate_key(key), value))
    return items
