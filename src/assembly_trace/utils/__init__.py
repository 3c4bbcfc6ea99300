"""Utility functions and helpers.

- errors: Exception hierarchy
- logging: Structured logging configuration
"""

from assembly_trace.utils.errors import (
    AssemblyTraceError,
    CaptureStrategyError,
    StackLineViewError,
)
from assembly_trace.utils.logging import (
    LogFormat,
    LogLevel,
    assembly_site_processor,
    configure_logging,
)

__all__ = [
    # Errors
    "AssemblyTraceError",
    "CaptureStrategyError",
    "StackLineViewError",
    # Logging
    "LogFormat",
    "LogLevel",
    "assembly_site_processor",
    "configure_logging",
]
