from .app_config import (
    LoggingConfig,
    LogLevel,
    ResponseConfig,
    configure_logging_from_config,
    load_config,
)

__all__ = [
    "LogLevel",
    "LoggingConfig",
    "ResponseConfig",
    "configure_logging_from_config",
    "load_config",
]
