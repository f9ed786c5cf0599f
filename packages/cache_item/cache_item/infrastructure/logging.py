"""Centralized logging configuration for cache-item."""

import json
import logging
import logging.handlers
import sys
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from cache_item.config import get_config

# Attributes every LogRecord carries; anything else was passed through ``extra``
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys() | {"message", "asctime"}
)


class LogLevel(str, Enum):
    """Valid log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Global log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Date format for log messages",
    )
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_path: Path | None = Field(default=None, description="Log file path")
    max_bytes: int = Field(
        default=10_485_760,  # 10MB
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        default=5,
        description="Number of backup log files to keep",
    )
    json_format: bool = Field(
        default=False,
        description="Use JSON format for structured logging",
    )

    @field_validator("file_path")
    @classmethod
    def validate_file_path(cls, v: Path | None) -> Path | None:
        """Ensure file path directory exists."""
        if v is not None:
            v.parent.mkdir(parents=True, exist_ok=True)
        return v


class StructuredFormatter(logging.Formatter):
    """Formatter rendering records as JSON, extra fields included.

    Values that JSON cannot represent, such as cached payloads carried in a
    diagnostic context, are rendered with ``str``.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_logging(config: LoggingConfig | None = None) -> None:
    """
    Set up logging configuration.

    Args:
        config: Logging configuration. If None, built from the settings.
    """
    if config is None:
        config = logging_config_from_settings()

    # Reset existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(config.level.value)

    if config.json_format:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.console_enabled:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if config.file_enabled and config.file_path:
        file_handler = logging.handlers.RotatingFileHandler(
            filename=config.file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info("Logging configured", extra={"config": config.model_dump(mode="json")})


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def logging_config_from_settings() -> LoggingConfig:
    """Build a logging configuration from the CACHE_ITEM_LOGGING__* settings."""
    settings = get_config().logging
    return LoggingConfig(
        level=LogLevel(settings.level.upper()),
        json_format=settings.json_format,
        max_bytes=settings.log_file_max_bytes,
        backup_count=settings.log_backup_count,
    )
