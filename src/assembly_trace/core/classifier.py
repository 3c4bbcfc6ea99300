"""Predicates that separate framework frames from caller frames.

Both predicates work on the namespace-qualified symbol of a frame
(``package.module.Class.method``) and never look at anything else.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from assembly_trace.config.loader import get_settings

# Plumbing outside the internal namespace that never names an operator:
# function adapters, decorator helpers, logging wrappers, thread pools,
# import machinery and reflective invocation.
SANITIZED_PREFIXES: tuple[str, ...] = (
    "functools.",
    "contextlib.",
    "logging.",
    "threading.",
    "concurrent.futures.",
    "importlib.",
    "inspect.",
    "runpy.",
)

# Relative to the internal prefix: hook dispatch, signal logging and the
# on-assembly wrapper modules.
SANITIZED_INTERNAL_MODULES: tuple[str, ...] = (
    "hooks",
    "signal_logger",
    "on_assembly",
)

ASSEMBLY_HOOK_SUFFIX = ".on_assembly"

# Test classes exercising internal code count as callers.
TEST_MARKER = "Test"


@dataclass(frozen=True)
class FrameClassifier:
    """Frame classification for one internal namespace prefix.

    Example:
        classifier = FrameClassifier("flowkit.core.")
        classifier.is_user_code("flowkit.core.stage.Stage.map")  # False
        classifier.is_user_code("my.app.Handler.run")  # True
    """

    internal_prefix: str
    _sanitized: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        internal = tuple(self.internal_prefix + name for name in SANITIZED_INTERNAL_MODULES)
        object.__setattr__(self, "_sanitized", SANITIZED_PREFIXES + internal)

    def is_user_code(self, symbol: str) -> bool:
        """True unless ``symbol`` is internal; anything named ``Test`` is user code."""
        return self.is_user_code_within(symbol, 0, len(symbol))

    def is_user_code_within(self, source: str, start: int, end: int) -> bool:
        """Classify the symbol occupying ``source[start:end]`` without slicing it."""
        if not source.startswith(self.internal_prefix, start, end):
            return True
        return source.find(TEST_MARKER, start, end) != -1

    def should_sanitize(self, symbol: str) -> bool:
        """True for known-noisy frames that should never become the operator."""
        if symbol.startswith(self._sanitized):
            return True
        return symbol.startswith(self.internal_prefix) and symbol.endswith(
            ASSEMBLY_HOOK_SUFFIX
        )

    def drop_internal_prefix(self, text: str) -> str:
        """Strip the internal prefix from the front of ``text`` if present."""
        prefix = self.internal_prefix
        return text[len(prefix) :] if text.startswith(prefix) else text


_default: FrameClassifier | None = None


def default_classifier() -> FrameClassifier:
    """Classifier for the configured internal prefix."""
    global _default
    prefix = get_settings().internal_prefix
    if _default is None or _default.internal_prefix != prefix:
        _default = FrameClassifier(prefix)
    return _default


def is_user_code(symbol: str) -> bool:
    """Classify ``symbol`` with the default classifier."""
    return default_classifier().is_user_code(symbol)


def should_sanitize(symbol: str) -> bool:
    """Check ``symbol`` against the default sanitize table."""
    return default_classifier().should_sanitize(symbol)
