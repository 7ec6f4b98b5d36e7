# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from unittest.mock import MagicMock

import pytest

from cacheadapter.cache.redis import RedisCache


@pytest.fixture
def pipe() -> MagicMock:
    """A queued MULTI/EXEC batch whose commit succeeds by default."""
    mock = MagicMock(name="pipeline")
    mock.execute.return_value = [True, True]
    return mock


@pytest.fixture
def client(pipe: MagicMock) -> MagicMock:
    """A store client that answers like a healthy Redis server."""
    mock = MagicMock(name="redis")
    mock.get.return_value = None
    mock.set.return_value = True
    mock.setex.return_value = b"OK"
    mock.delete.return_value = 1
    mock.exists.return_value = 1
    mock.flushdb.return_value = True
    mock.pipeline.return_value = pipe
    return mock


@pytest.fixture
def cache(client: MagicMock) -> RedisCache:
    return RedisCache(client)


@pytest.fixture(autouse=True)
def _clear_cache():
    """Reset the cache singleton between tests."""
    from cacheadapter.cache.factory import reset_cache

    reset_cache()
    yield
    reset_cache()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging so they do not outlive a test."""
    import logging

    logger = logging.getLogger("cacheadapter")
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
