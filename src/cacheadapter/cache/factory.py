# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Settings-driven construction of the cache adapter."""

from __future__ import annotations

import logging

from cacheadapter.cache.redis import RedisCache
from cacheadapter.cache.serializers import get_serializer
from cacheadapter.core.config import Settings
from cacheadapter.core.logging import redact_sensitive

logger = logging.getLogger("cacheadapter.cache.factory")

# Module-level singleton
_cache: RedisCache | None = None


def create_cache(settings: Settings | None = None) -> RedisCache:
    """Build a :class:`RedisCache` from application settings."""
    if settings is None:
        from cacheadapter.core.config import get_settings

        settings = get_settings()

    serializer = get_serializer(settings.serializer)
    logger.debug(
        "Connecting cache to %s (serializer=%s, precheck=%s)",
        redact_sensitive(settings.redis_url),
        serializer.name,
        settings.bulk_precheck,
    )
    return RedisCache.from_url(
        settings.redis_url,
        serializer,
        precheck=settings.bulk_precheck,
        socket_timeout=settings.socket_timeout,
    )


def get_cache() -> RedisCache:
    """Return the module-level :class:`RedisCache` singleton.

    Creates a new instance on first call using application settings.
    """
    global _cache
    if _cache is None:
        _cache = create_cache()
    return _cache


def reset_cache() -> None:
    """Reset the singleton (useful for testing)."""
    global _cache
    _cache = None
