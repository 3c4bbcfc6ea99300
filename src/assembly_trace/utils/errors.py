"""Exception types raised by assembly-trace.

Capture and extraction never raise on malformed stack content; the only
fatal condition is a process that cannot capture stacks at all.
"""

from __future__ import annotations


class AssemblyTraceError(Exception):
    """Base exception for all assembly-trace errors."""


class CaptureStrategyError(AssemblyTraceError):
    """No capture backend could be constructed on this interpreter.

    Attributes:
        attempted: Names of the candidate backends that were tried, in order.
    """

    def __init__(self, message: str, attempted: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.attempted = attempted


class StackLineViewError(AssemblyTraceError, ValueError):
    """A stack line view was created with bounds outside its buffer."""
