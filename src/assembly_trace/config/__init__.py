"""Configuration loading and validation."""

from .loader import configure, get_settings, load_config, lock_settings, reset_settings
from .schema import DEFAULT_INTERNAL_PREFIX, FileLoggingConfig, LoggingConfig, TraceSettings

__all__ = [
    # Loader
    "configure",
    "get_settings",
    "load_config",
    "lock_settings",
    "reset_settings",
    # Schema
    "DEFAULT_INTERNAL_PREFIX",
    "FileLoggingConfig",
    "LoggingConfig",
    "TraceSettings",
]
