# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""cacheadapter - Standard key-value cache interface on top of Redis."""

__version__ = "0.1.0"

from cacheadapter.cache import CacheInterface, RedisCache, get_cache
from cacheadapter.core.exceptions import CacheAdapterError, InvalidArgumentError

__all__ = [
    "CacheAdapterError",
    "CacheInterface",
    "InvalidArgumentError",
    "RedisCache",
    "__version__",
    "get_cache",
]
