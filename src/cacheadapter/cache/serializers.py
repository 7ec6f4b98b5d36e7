# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pluggable value serializers.

The store only ever sees the bytes produced here.  :class:`PickleSerializer`
round-trips arbitrary object graphs and is the default;
:class:`JsonSerializer` is interoperable with non-Python readers but limited
to JSON types.  Both raise
:class:`~cacheadapter.core.exceptions.SerializationError` on failure.
"""

from __future__ import annotations

import abc
import json
import pickle
from typing import Any

from cacheadapter.core.exceptions import ConfigurationError, SerializationError


class Serializer(abc.ABC):
    """Converts cache values to bytes and back."""

    name: str = ""

    @abc.abstractmethod
    def dumps(self, value: Any) -> bytes:
        """Encode *value* for storage."""

    @abc.abstractmethod
    def loads(self, data: bytes) -> Any:
        """Decode bytes previously produced by :meth:`dumps`."""


class PickleSerializer(Serializer):
    name = "pickle"

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        self._protocol = protocol

    def dumps(self, value: Any) -> bytes:
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as exc:
            msg = f"Cannot pickle value of type {type(value).__name__}: {exc}"
            raise SerializationError(msg) from exc

    def loads(self, data: bytes) -> Any:
        try:
            return pickle.loads(data)  # noqa: S301
        except (pickle.UnpicklingError, EOFError, ValueError, TypeError,
                AttributeError, ImportError, IndexError) as exc:
            msg = f"Cannot unpickle stored value: {exc}"
            raise SerializationError(msg) from exc


class JsonSerializer(Serializer):
    name = "json"

    def dumps(self, value: Any) -> bytes:
        try:
            return json.dumps(value, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as exc:
            msg = f"Cannot JSON-encode value of type {type(value).__name__}: {exc}"
            raise SerializationError(msg) from exc

    def loads(self, data: bytes) -> Any:
        try:
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            return json.loads(data)
        except ValueError as exc:
            msg = f"Cannot decode stored JSON value: {exc}"
            raise SerializationError(msg) from exc


_REGISTRY: dict[str, type[Serializer]] = {
    PickleSerializer.name: PickleSerializer,
    JsonSerializer.name: JsonSerializer,
}


def get_serializer(name: str) -> Serializer:
    """Instantiate the serializer registered under *name*.

    Raises:
        ConfigurationError: If no serializer has that name.
    """
    try:
        return _REGISTRY[name.lower()]()
    except KeyError:
        supported = ", ".join(sorted(_REGISTRY))
        msg = f"Unsupported serializer: {name}. Supported: {supported}"
        raise ConfigurationError(msg) from None
