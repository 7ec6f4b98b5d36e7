# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Cache interface and its Redis adapter."""

from cacheadapter.cache.base import CacheInterface
from cacheadapter.cache.factory import create_cache, get_cache, reset_cache
from cacheadapter.cache.redis import RedisCache

__all__ = ["CacheInterface", "RedisCache", "create_cache", "get_cache", "reset_cache"]
