# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_SERIALIZERS = ("pickle", "json")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CACHEADAPTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Store
    redis_url: str = "redis://localhost:6379/0"
    socket_timeout: float | None = None

    # Adapter
    serializer: str = "pickle"  # "pickle" or "json"
    bulk_precheck: bool = True

    @field_validator("serializer", mode="before")
    @classmethod
    def _parse_serializer(cls, v: object) -> str:
        name = str(v).strip().lower()
        if name not in _SERIALIZERS:
            msg = f"serializer must be one of {', '.join(_SERIALIZERS)}"
            raise ValueError(msg)
        return name

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


def get_settings() -> Settings:
    return Settings()
