# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Redis-backed implementation of :class:`CacheInterface`.

:class:`RedisCache` is stateless: every call validates its arguments,
translates them into one or more Redis commands and maps the replies onto
the boolean/value contract of the interface.  Store errors never escape;
they are logged and reported as ``False`` (or as the caller's default for
reads).  Malformed arguments raise
:class:`~cacheadapter.core.exceptions.InvalidArgumentError` before any
command is sent.

Bulk mutations run in two passes by default: a non-atomic pre-check that
stops at the first failing key, then a ``MULTI``/``EXEC`` transaction that
re-applies every operation.  Writes made by the pre-check are not rolled
back, so ``False`` from a bulk mutation means the keyspace may be partially
modified.  With ``precheck=False`` only the transaction is sent and each of
its replies is checked individually.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import redis
from redis.exceptions import RedisError

from cacheadapter.cache.base import CacheInterface, CacheKey
from cacheadapter.cache.serializers import PickleSerializer, Serializer
from cacheadapter.cache.ttl import TTL, normalize_ttl
from cacheadapter.cache.validation import validate_items, validate_key, validate_keys
from cacheadapter.core.exceptions import SerializationError

logger = logging.getLogger("cacheadapter.cache.redis")

# Acknowledgment Redis sends for a successful SETEX.
OK_TOKEN = b"OK"

_ReplyCheck = Callable[[Any], bool]


def _raw_reply(response: Any, **options: Any) -> Any:
    return response


def is_ok(reply: Any) -> bool:
    """Return ``True`` only for the store's ``OK`` status token."""
    if isinstance(reply, str):
        reply = reply.encode()
    return isinstance(reply, bytes) and reply == OK_TOKEN


def _stored(reply: Any) -> bool:
    return bool(reply)


def _removed_one(reply: Any) -> bool:
    return reply == 1


def _counted(reply: Any) -> bool:
    return isinstance(reply, int)


class RedisCache(CacheInterface):
    """Cache adapter over a ``redis-py`` client.

    Args:
        client: A :class:`redis.Redis` instance, or anything exposing the
            same ``get``/``set``/``setex``/``delete``/``exists``/``flushdb``
            and ``pipeline`` methods.  It must not decode responses.  When
            the client supports ``set_response_callback`` its SETEX replies
            are switched to the raw status token checked by :func:`is_ok`.
        serializer: Value encoder; defaults to :class:`PickleSerializer`.
        precheck: Run the non-atomic pre-check pass before the
            transaction in :meth:`set_multiple` and :meth:`delete_multiple`.
    """

    def __init__(
        self,
        client: Any,
        serializer: Serializer | None = None,
        *,
        precheck: bool = True,
    ) -> None:
        if callable(getattr(client, "set_response_callback", None)):
            client.set_response_callback("SETEX", _raw_reply)
        self._client = client
        self._serializer = serializer or PickleSerializer()
        self._precheck = precheck

    @classmethod
    def from_url(
        cls,
        url: str,
        serializer: Serializer | None = None,
        *,
        precheck: bool = True,
        **kwargs: Any,
    ) -> RedisCache:
        """Connect to *url* and wrap the resulting client."""
        kwargs["decode_responses"] = False
        client = redis.Redis.from_url(url, **kwargs)
        return cls(client, serializer, precheck=precheck)

    @property
    def client(self) -> Any:
        return self._client

    @property
    def serializer(self) -> Serializer:
        return self._serializer

    # ------------------------------------------------------------------
    # Single-key operations
    # ------------------------------------------------------------------

    def get(self, key: CacheKey, default: Any = None) -> Any:
        validate_key(key)
        try:
            raw = self._client.get(key)
        except RedisError as exc:
            logger.warning("GET %r failed: %s", key, exc)
            return default
        if raw is None:
            logger.debug("Cache MISS for key %r", key)
            return default
        logger.debug("Cache HIT for key %r", key)
        try:
            return self._serializer.loads(raw)
        except SerializationError as exc:
            logger.warning("Discarding undecodable value for key %r: %s", key, exc)
            return default

    def set(self, key: CacheKey, value: Any, ttl: TTL = None) -> bool:
        validate_key(key)
        seconds = normalize_ttl(ttl)
        return self._write(key, self._serializer.dumps(value), seconds)

    def delete(self, key: CacheKey) -> bool:
        validate_key(key)
        return self._remove(key)

    def has(self, key: CacheKey) -> bool:
        validate_key(key)
        try:
            count = self._client.exists(key)
        except RedisError as exc:
            logger.warning("EXISTS %r failed: %s", key, exc)
            return False
        return count >= 1

    def clear(self) -> bool:
        try:
            flushed = self._client.flushdb()
        except RedisError as exc:
            logger.warning("FLUSHDB failed: %s", exc)
            return False
        logger.info("Cache cleared (flushed=%s)", flushed)
        return flushed

    # ------------------------------------------------------------------
    # Bulk operations
    # ------------------------------------------------------------------

    def get_multiple(
        self, keys: Iterable[CacheKey], default: Any = None
    ) -> dict[CacheKey, Any]:
        # Independent reads: no isolation from concurrent writers.
        return {key: self.get(key, default) for key in validate_keys(keys)}

    def set_multiple(
        self,
        values: Mapping[CacheKey, Any] | Iterable[tuple[CacheKey, Any]],
        ttl: TTL = None,
    ) -> bool:
        items = validate_items(values)
        seconds = normalize_ttl(ttl)
        encoded = [(key, self._serializer.dumps(value)) for key, value in items]

        if self._precheck:
            for key, data in encoded:
                if not self._write(key, data, seconds):
                    logger.warning("set_multiple aborted: write for key %r failed", key)
                    return False

        pipe = self._client.pipeline(transaction=True)
        for key, data in encoded:
            pipe.set(key, data, ex=seconds)
        return self._commit(pipe, [_stored] * len(encoded))

    def delete_multiple(self, keys: Iterable[CacheKey]) -> bool:
        keys = validate_keys(keys)

        if self._precheck:
            for key in keys:
                if not self._remove(key):
                    logger.warning("delete_multiple aborted: key %r was not removed", key)
                    return False

        pipe = self._client.pipeline(transaction=True)
        for key in keys:
            pipe.delete(key)
        # After the pre-check the keys are already gone, so the
        # transaction only has to run without errors.
        check = _counted if self._precheck else _removed_one
        return self._commit(pipe, [check] * len(keys))

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _write(self, key: CacheKey, data: bytes, seconds: int | None) -> bool:
        try:
            if seconds is not None:
                ok = is_ok(self._client.setex(key, seconds, data))
            else:
                ok = self._client.set(key, data) is True
        except RedisError as exc:
            logger.warning("SET %r failed: %s", key, exc)
            return False
        logger.debug("SET %r (ttl=%s) -> %s", key, seconds, ok)
        return ok

    def _remove(self, key: CacheKey) -> bool:
        try:
            count = self._client.delete(key)
        except RedisError as exc:
            logger.warning("DEL %r failed: %s", key, exc)
            return False
        return count == 1

    def _commit(self, pipe: Any, checks: list[_ReplyCheck]) -> bool:
        try:
            replies = pipe.execute()
        except RedisError as exc:
            logger.warning("Transaction failed: %s", exc)
            return False
        if len(replies) != len(checks):
            logger.warning(
                "Transaction returned %d replies for %d commands", len(replies), len(checks)
            )
            return False
        return all(
            not isinstance(reply, Exception) and check(reply)
            for check, reply in zip(checks, replies)
        )
