"""Process-wide choice of the stack-capture backend.

The interpreter's capabilities do not change while it runs, so the backend
is chosen once and never revisited. Candidates are tried fastest first; the
first one that constructs wins and later ones are never attempted.
"""

from __future__ import annotations

from collections.abc import Sequence
from threading import Lock

import structlog

from assembly_trace.config.loader import get_settings, lock_settings
from assembly_trace.core.backends import FrameWalkBackend, InspectStackBackend
from assembly_trace.core.classifier import FrameClassifier
from assembly_trace.interfaces.capture import BackendFactory, CaptureBackend, Capturer
from assembly_trace.utils.errors import CaptureStrategyError

log = structlog.get_logger()

DEFAULT_CANDIDATES: tuple[BackendFactory, ...] = (FrameWalkBackend, InspectStackBackend)


def _candidate_name(factory: BackendFactory) -> str:
    return str(getattr(factory, "name", None) or getattr(factory, "__name__", repr(factory)))


class CaptureStrategySelector:
    """Picks the first workable capture backend.

    Example:
        capturer = CaptureStrategySelector.get_instance().capturer
        info = capturer()
        print(info.operator)
    """

    _instance: CaptureStrategySelector | None = None
    _lock = Lock()

    def __init__(
        self,
        candidates: Sequence[BackendFactory] = DEFAULT_CANDIDATES,
        classifier: FrameClassifier | None = None,
        full: bool = False,
    ) -> None:
        """Select a backend.

        Args:
            candidates: Backend constructors, most specific first
            classifier: Classifier handed to the chosen backend
            full: Full-capture mode for the chosen backend

        Raises:
            CaptureStrategyError: If no candidate can be constructed
        """
        if classifier is None:
            classifier = FrameClassifier(get_settings().internal_prefix)

        attempted: list[str] = []
        backend: CaptureBackend | None = None
        for factory in candidates:
            attempted.append(_candidate_name(factory))
            try:
                backend = factory(classifier, full)
            except Exception:  # noqa: S112
                # Missing capability or any other construction fault: next tier.
                continue
            break

        if backend is None:
            raise CaptureStrategyError(
                f"Valid capture strategy not found (tried: {', '.join(attempted) or 'none'})",
                attempted=tuple(attempted),
            )

        self._backend = backend
        self._classifier = classifier
        self._full = full
        log.debug("capture_backend_selected", backend=backend.name, full=full)

    @classmethod
    def get_instance(cls) -> CaptureStrategySelector:
        """Get the process-wide selector, building it from settings on first use.

        Publishing the selector pins the settings it was built from.

        Returns:
            The CaptureStrategySelector singleton

        Raises:
            CaptureStrategyError: If no backend works on this interpreter
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    settings = get_settings()
                    selector = cls(
                        DEFAULT_CANDIDATES,
                        FrameClassifier(settings.internal_prefix),
                        settings.full_stacktrace,
                    )
                    lock_settings()
                    cls._instance = selector
        return cls._instance

    @property
    def backend(self) -> CaptureBackend:
        return self._backend

    @property
    def classifier(self) -> FrameClassifier:
        return self._classifier

    @property
    def full(self) -> bool:
        return self._full

    @property
    def capturer(self) -> Capturer:
        """Zero-argument capture of the caller's assembly site."""
        return self._backend.capture


def obtain_capturer() -> Capturer:
    """Return the process-wide capturer.

    Call the result directly from the assembly site; wrapping it in another
    helper makes that helper the first examined frame.
    """
    return CaptureStrategySelector.get_instance().capturer


def initialize() -> CaptureStrategySelector:
    """Select the backend now, so a misconfigured interpreter fails at start-up."""
    return CaptureStrategySelector.get_instance()
