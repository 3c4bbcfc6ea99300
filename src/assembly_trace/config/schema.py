"""Pydantic models for configuration schema."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_INTERNAL_PREFIX = "assembly_trace.publisher."


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: Path = Path("/var/log/assembly-trace/trace.log")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "console"
    file: FileLoggingConfig = FileLoggingConfig()


class TraceSettings(BaseSettings):
    """Root configuration for assembly-site capture.

    Read once per process. ``full_stacktrace`` disables the sanitize filter
    and the short-frame skip rule; ``internal_prefix`` is the module namespace
    whose frames count as framework internals.
    """

    full_stacktrace: bool = False
    internal_prefix: str = Field(DEFAULT_INTERNAL_PREFIX, min_length=2)
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="ASSEMBLY_TRACE_",
        env_nested_delimiter="__",
        frozen=True,
    )

    @field_validator("internal_prefix")
    @classmethod
    def validate_internal_prefix(cls, v: str) -> str:
        """Validate the internal namespace prefix is a dotted package prefix."""
        if v != v.strip():
            raise ValueError("Internal prefix must not contain surrounding whitespace")
        if not v.endswith("."):
            raise ValueError(f"Internal prefix must end with '.': {v}")
        return v
