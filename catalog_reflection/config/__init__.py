"""Configuration management."""

from .config import (
    Config,
    DataSourceConfig,
    SelectionConfig,
    LoggingConfig,
    load_config,
)

__all__ = [
    "Config",
    "DataSourceConfig",
    "SelectionConfig",
    "LoggingConfig",
    "load_config",
]
