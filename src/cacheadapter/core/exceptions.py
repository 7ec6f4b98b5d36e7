# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for cacheadapter."""


class CacheAdapterError(Exception):
    """Base exception for all cacheadapter errors."""


class ConfigurationError(CacheAdapterError):
    """Invalid or missing configuration."""


class InvalidArgumentError(CacheAdapterError, ValueError):
    """A key, TTL, or bulk collection has an unsupported shape.

    Raised before the store is contacted.
    """


class SerializationError(CacheAdapterError):
    """A value could not be encoded for storage or decoded from it."""
