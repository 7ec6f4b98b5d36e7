# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""TTL normalization.

A TTL reaches the store as a single integer second count, or not at all.
Accepted inputs are ``None`` (no expiry), a non-negative ``int`` and a
:class:`~datetime.timedelta`.  Durations are truncated to whole seconds;
zero or negative durations become ``0`` and still produce an expiring
write rather than a write without expiry.
"""

from __future__ import annotations

from datetime import timedelta

from cacheadapter.core.exceptions import InvalidArgumentError

TTL = int | timedelta | None


def normalize_ttl(ttl: object) -> int | None:
    """Resolve *ttl* to ``None`` or a non-negative number of seconds.

    Raises:
        InvalidArgumentError: If *ttl* has any other type, or is a
            negative integer.
    """
    if ttl is None:
        return None
    # bool is an int subclass; True is not a duration.
    if isinstance(ttl, bool):
        msg = "TTL must be None, an int or a timedelta, got bool"
        raise InvalidArgumentError(msg)
    if isinstance(ttl, int):
        if ttl < 0:
            msg = f"TTL must not be negative, got {ttl}"
            raise InvalidArgumentError(msg)
        return ttl
    if isinstance(ttl, timedelta):
        return max(int(ttl.total_seconds()), 0)

    msg = f"TTL must be None, an int or a timedelta, got {type(ttl).__name__}"
    raise InvalidArgumentError(msg)
