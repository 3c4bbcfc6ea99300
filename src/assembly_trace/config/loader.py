"""Configuration loader with YAML parsing and environment variable substitution."""

import os
import re
from pathlib import Path

import yaml

from assembly_trace.utils.errors import AssemblyTraceError

from .schema import TraceSettings

_settings: TraceSettings | None = None
_locked = False


def substitute_env_vars(text: str) -> str:
    """
    Replace ${VAR_NAME} patterns with environment variable values.

    Args:
        text: Text containing ${VAR_NAME} patterns

    Returns:
        Text with environment variables substituted

    Raises:
        ValueError: If a referenced environment variable is not found
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ValueError(f"Environment variable {var_name} not found")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def load_config(path: Path) -> TraceSettings:
    """
    Load configuration from YAML file with environment variable substitution.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated TraceSettings instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If environment variables are missing
        ValidationError: If config doesn't match schema
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with path.open() as f:
        raw_yaml = f.read()

    yaml_with_env = substitute_env_vars(raw_yaml)

    # An empty document means "all defaults"
    config_dict = yaml.safe_load(yaml_with_env) or {}

    return TraceSettings.model_validate(config_dict)


def get_settings() -> TraceSettings:
    """Return the process-wide settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = TraceSettings()
    return _settings


def lock_settings() -> TraceSettings:
    """Pin the current settings for the rest of the process.

    Called once the capture backend is published, so live capture and the
    module-level classifiers keep agreeing on the internal prefix.

    Returns:
        The settings now in force
    """
    global _locked
    settings = get_settings()
    _locked = True
    return settings


def configure(settings: TraceSettings | None) -> None:
    """Replace the process-wide settings.

    Hosting frameworks call this once at start-up, before the first capture.
    Passing None makes the next :func:`get_settings` call re-read the
    environment.

    Args:
        settings: Settings to install, or None to reset

    Raises:
        AssemblyTraceError: If capture was already initialized
    """
    global _settings
    if _locked:
        raise AssemblyTraceError("Settings cannot change after capture is initialized")
    _settings = settings


def reset_settings() -> None:
    """Forget installed settings and unpin them; for test isolation only."""
    global _settings, _locked
    _settings = None
    _locked = False
