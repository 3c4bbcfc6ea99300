"""Stack-capture backends and the frame walk they share.

Two capability tiers are provided, fastest first:

- ``FrameWalkBackend`` follows ``f_back`` links from ``sys._getframe``,
  materialising nothing but the frames it looks at.
- ``InspectStackBackend`` uses ``inspect.stack()``, which snapshots the
  whole stack but only relies on the public ``inspect`` API.
"""

from __future__ import annotations

import inspect
import sys
from collections.abc import Callable, Iterable, Iterator
from types import FrameType

from assembly_trace.core.classifier import FrameClassifier
from assembly_trace.models.assembly import AssemblyInformation
from assembly_trace.models.frame import FrameRecord


def walk_frames(
    frames: Iterable[FrameRecord],
    classifier: FrameClassifier,
    full: bool = False,
) -> AssemblyInformation:
    """Find the internal/user boundary in a stack, innermost frame first.

    Args:
        frames: Frames from the capture site outwards
        classifier: Classifier for the internal namespace
        full: Keep every internal frame instead of sanitizing

    Returns:
        AssemblyInformation for the first user frame and the internal frame
        right before it. Without a user frame, the deepest retained internal
        frame is the operator, or the last examined one when every internal
        frame was dropped. Only an empty walk gives no information.
    """
    previous: FrameRecord | None = None
    last_examined: FrameRecord | None = None
    for frame in frames:
        symbol = frame.qualified_name
        if classifier.is_user_code(symbol):
            if previous is None:
                return AssemblyInformation.from_stack_frame(str(frame))
            return AssemblyInformation.from_stack_frames(
                str(previous), str(frame), classifier.internal_prefix
            )

        last_examined = frame
        if not full:
            # Synthetic and native frames carry no useful location.
            if frame.line_number <= 1:
                continue
            if classifier.should_sanitize(symbol):
                continue

        previous = frame

    operator = previous if previous is not None else last_examined
    if operator is None:
        return AssemblyInformation.empty()
    return AssemblyInformation.from_operator(classifier.drop_internal_prefix(str(operator)))


def _iter_frames(frame: FrameType | None) -> Iterator[FrameRecord]:
    while frame is not None:
        yield FrameRecord.from_frame(frame)
        frame = frame.f_back


class FrameWalkBackend:
    """Capture via the interpreter's private frame accessor."""

    name = "frame_walk"

    # capture() itself
    SKIP_FRAMES = 1

    def __init__(self, classifier: FrameClassifier, full: bool = False) -> None:
        getframe: Callable[[int], FrameType] | None = getattr(sys, "_getframe", None)
        if getframe is None:
            raise RuntimeError("sys._getframe is not available on this interpreter")
        self._getframe = getframe
        self._classifier = classifier
        self._full = full

    def capture(self) -> AssemblyInformation:
        frames = _iter_frames(self._getframe(self.SKIP_FRAMES))
        return walk_frames(frames, self._classifier, self._full)


class InspectStackBackend:
    """Capture via ``inspect.stack()``."""

    name = "inspect_stack"

    # capture() itself
    SKIP_FRAMES = 1

    def __init__(self, classifier: FrameClassifier, full: bool = False) -> None:
        if inspect.currentframe() is None:
            raise RuntimeError("Interpreter does not expose stack frames")
        self._classifier = classifier
        self._full = full

    def capture(self) -> AssemblyInformation:
        stack = inspect.stack(context=0)
        try:
            frames = (
                FrameRecord.from_frame(info.frame, info.lineno)
                for info in stack[self.SKIP_FRAMES :]
            )
            return walk_frames(frames, self._classifier, self._full)
        finally:
            # Frame objects in the snapshot form reference cycles.
            del stack
