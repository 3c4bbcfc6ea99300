"""Protocol definitions for pluggable capture backends."""

from .capture import BackendFactory, CaptureBackend, Capturer

__all__ = ["BackendFactory", "CaptureBackend", "Capturer"]
