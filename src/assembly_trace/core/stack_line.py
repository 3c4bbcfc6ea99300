"""Windowed views over lines of a rendered stack trace.

Parsing a trace creates one view per line instead of one string per line;
only the lines that end up in a label are ever copied out of the buffer.
"""

from __future__ import annotations

from collections.abc import Iterator

from assembly_trace.core.classifier import FrameClassifier, default_classifier
from assembly_trace.utils.errors import StackLineViewError


class StackLineView:
    """A read-only ``[start, end)`` window over a larger text buffer.

    Every operation is bounded by the window: nothing before ``start`` or at
    or after ``end`` is ever matched, even when the buffer continues.
    """

    __slots__ = ("_end", "_source", "_start")

    def __init__(self, source: str, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(source):
            raise StackLineViewError(
                f"Invalid window [{start}, {end}) over buffer of length {len(source)}"
            )
        self._source = source
        self._start = start
        self._end = end

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    def __len__(self) -> int:
        return self._end - self._start

    def is_empty(self) -> bool:
        return self._start == self._end

    def trim(self) -> StackLineView:
        """Narrow the window to exclude leading and trailing whitespace."""
        source = self._source
        start, end = self._start, self._end
        while start < end and source[start].isspace():
            start += 1
        while end > start and source[end - 1].isspace():
            end -= 1
        if start == self._start and end == self._end:
            return self
        return StackLineView(source, start, end)

    def contains(self, substring: str) -> bool:
        return self._source.find(substring, self._start, self._end) != -1

    def startswith(self, prefix: str) -> bool:
        return self._source.startswith(prefix, self._start, self._end)

    def is_user_code(self, classifier: FrameClassifier | None = None) -> bool:
        """Classify the line; see :meth:`FrameClassifier.is_user_code`."""
        classifier = classifier or default_classifier()
        return classifier.is_user_code_within(self._source, self._start, self._end)

    def without_location_suffix(self) -> StackLineView:
        """Drop everything from the first ``'('`` on, e.g. ``(stage.py:42)``."""
        paren = self._source.find("(", self._start, self._end)
        if paren <= self._start:
            return self
        return StackLineView(self._source, self._start, paren)

    def without_internal_prefix(self, classifier: FrameClassifier | None = None) -> StackLineView:
        """Drop the internal namespace prefix from the front, if present."""
        prefix = (classifier or default_classifier()).internal_prefix
        if not self.startswith(prefix):
            return self
        return StackLineView(self._source, self._start + len(prefix), self._end)

    def to_text(self) -> str:
        """Copy the window out of the buffer."""
        return self._source[self._start : self._end]

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"StackLineView({self.to_text()!r}, start={self._start}, end={self._end})"


def trimmed_nonempty_lines(source: str) -> Iterator[StackLineView]:
    """Lazily yield a trimmed view for every non-blank line of ``source``."""
    index = 0
    length = len(source)
    while index < length:
        end = source.find("\n", index)
        if end == -1:
            end = length
        line = StackLineView(source, index, end).trim()
        index = end + 1
        if not line.is_empty():
            yield line
