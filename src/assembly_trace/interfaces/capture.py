"""Abstract interface for stack-capture backends."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..core.classifier import FrameClassifier
    from ..models.assembly import AssemblyInformation

Capturer = Callable[[], "AssemblyInformation"]


class CaptureBackend(Protocol):
    """One way of walking the current call stack.

    Backends are constructed once per process by the strategy selector.
    Construction must fail (raise) when the interpreter lacks the capability
    the backend relies on, so that the selector can fall back to the next one.
    """

    name: str

    def capture(self) -> AssemblyInformation:
        """
        Walk the caller's stack and describe its assembly site.

        The first examined frame is the caller of ``capture`` itself; frames
        of the capture machinery are never classified.

        Returns:
            Fresh AssemblyInformation for the calling site
        """
        ...


class BackendFactory(Protocol):
    """Constructor of a :class:`CaptureBackend` candidate."""

    def __call__(self, classifier: FrameClassifier, full: bool = False) -> CaptureBackend:
        """
        Build the backend.

        Args:
            classifier: Frame classifier for the configured internal prefix
            full: Keep every internal frame (no sanitizing, no short-frame skip)

        Raises:
            Exception: If the backend cannot run on this interpreter
        """
        ...
