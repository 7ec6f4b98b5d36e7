# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Abstract cache interface with single-key and bulk operations."""

from __future__ import annotations

import abc
from collections.abc import Iterable, Mapping
from typing import Any

from cacheadapter.cache.ttl import TTL

CacheKey = str | bytes


class CacheInterface(abc.ABC):
    """Standard key-value cache contract.

    Implementations are interchangeable: callers only rely on the return
    values documented here.  Every method raises
    :class:`~cacheadapter.core.exceptions.InvalidArgumentError` for a
    malformed key, TTL, or bulk collection before touching storage.
    """

    @abc.abstractmethod
    def get(self, key: CacheKey, default: Any = None) -> Any:
        """Fetch a value from the cache.

        Returns:
            The stored value, or *default* if the key does not exist.
        """

    @abc.abstractmethod
    def set(self, key: CacheKey, value: Any, ttl: TTL = None) -> bool:
        """Persist *value* under *key*.

        Args:
            key: Cache key.
            value: Any value the configured serializer accepts.
            ttl: ``None`` for no expiry, a non-negative number of seconds,
                or a :class:`~datetime.timedelta`.

        Returns:
            ``True`` on success, ``False`` otherwise.
        """

    @abc.abstractmethod
    def delete(self, key: CacheKey) -> bool:
        """Remove *key*.

        Returns:
            ``True`` if exactly one key was removed.
        """

    @abc.abstractmethod
    def has(self, key: CacheKey) -> bool:
        """Return ``True`` if *key* is present in the cache."""

    @abc.abstractmethod
    def clear(self) -> bool:
        """Wipe every key of the cache.

        Returns:
            ``True`` on success, ``False`` otherwise.
        """

    @abc.abstractmethod
    def get_multiple(
        self, keys: Iterable[CacheKey], default: Any = None
    ) -> dict[CacheKey, Any]:
        """Fetch several values.

        Returns:
            A dict with one entry per requested key, in request order.
            Missing keys map to *default*.
        """

    @abc.abstractmethod
    def set_multiple(
        self,
        values: Mapping[CacheKey, Any] | Iterable[tuple[CacheKey, Any]],
        ttl: TTL = None,
    ) -> bool:
        """Persist several key/value pairs as one unit.

        Returns:
            ``True`` if every value was stored.
        """

    @abc.abstractmethod
    def delete_multiple(self, keys: Iterable[CacheKey]) -> bool:
        """Remove several keys as one unit.

        Returns:
            ``True`` if every key was removed.
        """

    def close(self) -> None:  # noqa: B027
        """Release any resources held by the implementation."""
