from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, field_validator

from httpresp.core.common.logging import LogFormat, configure_logging

logger = logging.getLogger(__name__)

ENV_PREFIX = "HTTPRESP_"


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.PLAIN
    log_file: str | None = None


class ResponseConfig(BaseModel):
    """Tuning knobs for response emission.

    Sizes are in characters for string bodies and bytes everywhere else.
    """

    large_string_threshold: int = 32 * 1024
    string_chunk_size: int = 16 * 1024
    stream_chunk_size: int = 32 * 1024
    pool_max_retained: int = 32
    pool_max_buffer_size: int = 1024 * 1024
    # Negative values are sent as Max-Age=0.
    expired_cookie_max_age: int = -1
    json_ensure_ascii: bool = False
    json_trailing_newline: bool = True
    logging: LoggingConfig = LoggingConfig()

    @field_validator(
        "large_string_threshold",
        "string_chunk_size",
        "stream_chunk_size",
        "pool_max_retained",
        "pool_max_buffer_size",
    )
    @classmethod
    def _must_be_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive integer")
        return value

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> ResponseConfig:
        """Create a ResponseConfig from ``HTTPRESP_*`` environment variables.

        Unset variables keep their defaults; unparsable numbers fall back to
        the default as well.
        """
        env: Mapping[str, str] = environ if environ is not None else os.environ
        return cls(**_env_overrides(env))


def _to_int(value: str, fallback: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


def _to_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    defaults = ResponseConfig.model_fields
    fields: dict[str, Callable[[str], Any]] = {
        "large_string_threshold": lambda v: _to_int(
            v, defaults["large_string_threshold"].default
        ),
        "string_chunk_size": lambda v: _to_int(v, defaults["string_chunk_size"].default),
        "stream_chunk_size": lambda v: _to_int(v, defaults["stream_chunk_size"].default),
        "pool_max_retained": lambda v: _to_int(v, defaults["pool_max_retained"].default),
        "pool_max_buffer_size": lambda v: _to_int(
            v, defaults["pool_max_buffer_size"].default
        ),
        "expired_cookie_max_age": lambda v: _to_int(
            v, defaults["expired_cookie_max_age"].default
        ),
        "json_ensure_ascii": _to_bool,
        "json_trailing_newline": _to_bool,
    }

    overrides: dict[str, Any] = {}
    for name, transform in fields.items():
        raw = env.get(ENV_PREFIX + name.upper())
        if raw is not None:
            overrides[name] = transform(raw)

    logging_overrides: dict[str, Any] = {}
    if (level := env.get(ENV_PREFIX + "LOG_LEVEL")) is not None:
        logging_overrides["level"] = level.strip().upper()
    if (log_format := env.get(ENV_PREFIX + "LOG_FORMAT")) is not None:
        logging_overrides["format"] = log_format.strip().lower()
    if (log_file := env.get(ENV_PREFIX + "LOG_FILE")) is not None:
        logging_overrides["log_file"] = log_file
    if logging_overrides:
        overrides["logging"] = logging_overrides
    return overrides


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ResponseConfig:
    """
    Load configuration from a YAML file and the environment.

    Environment variables take precedence over file values.

    Args:
        config_path: Optional path to a ``.yaml``/``.yml`` file

    Returns:
        ResponseConfig instance
    """
    env = environ if environ is not None else os.environ
    config_data: dict[str, Any] = {}

    if config_path:
        import yaml

        path = Path(config_path)
        if not path.exists():
            logger.warning(f"Configuration file not found: {config_path}")
        else:
            if path.suffix.lower() not in [".yaml", ".yml"]:
                raise ValueError(
                    f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml)."
                )
            with open(path, encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
            if not isinstance(file_config, dict):
                raise ValueError("Configuration file must contain a mapping")
            config_data.update(file_config)

    overrides = _env_overrides(env)
    file_logging = config_data.get("logging")
    if isinstance(file_logging, dict) and "logging" in overrides:
        overrides["logging"] = {**file_logging, **overrides["logging"]}
    config_data.update(overrides)
    return ResponseConfig(**config_data)


def configure_logging_from_config(config: ResponseConfig | LoggingConfig) -> None:
    """Apply the logging section of ``config`` to stdlib logging and structlog."""
    settings = config.logging if isinstance(config, ResponseConfig) else config
    configure_logging(
        level=settings.level.value,
        log_format=settings.format,
        log_file=settings.log_file,
    )
