"""Centralized configuration management for cache items.

This module provides a centralized configuration system that supports:
- Environment variable overrides
- Default values with validation
- Type safety using Pydantic
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ItemConfig(BaseModel):
    """Cache item configuration."""

    default_lifetime: int = Field(
        default=0,
        description="Lifetime in seconds applied when an expiration is reset; 0 never expires",
    )

    reserved_characters: str = Field(
        default="{}()/\\@:",
        description="Characters that cache keys must not contain",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Global log level")

    json_format: bool = Field(default=False, description="Use JSON format for structured logging")

    log_file_max_bytes: int = Field(
        default=10_485_760,  # 10MB
        ge=1_048_576,  # 1MB
        le=104_857_600,  # 100MB
        description="Maximum log file size in bytes",
    )

    log_backup_count: int = Field(
        default=5, ge=1, le=100, description="Number of backup log files to keep"
    )


class CacheItemConfig(BaseSettings):
    """Main cache item configuration.

    All configuration values can be overridden using environment variables
    with the prefix CACHE_ITEM_ (e.g., CACHE_ITEM_ITEM__DEFAULT_LIFETIME).
    """

    model_config = SettingsConfigDict(
        env_prefix="CACHE_ITEM_",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    item: ItemConfig = Field(default_factory=ItemConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_config() -> CacheItemConfig:
    """Get the singleton configuration instance.

    Returns:
        CacheItemConfig: The configuration instance
    """
    return CacheItemConfig()


def reload_config() -> CacheItemConfig:
    """Reload configuration from environment.

    This clears the cache and creates a new configuration instance.

    Returns:
        CacheItemConfig: The new configuration instance
    """
    get_config.cache_clear()
    return get_config()
