"""Shared test fixtures for assembly-trace."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog

from assembly_trace.config.loader import reset_settings
from assembly_trace.core.classifier import FrameClassifier
from assembly_trace.core.selector import CaptureStrategySelector

FIXTURES_DIR = Path(__file__).parent / "fixtures"
TRACES_DIR = FIXTURES_DIR / "traces"

INTERNAL_PREFIX = "flowkit.core."

# A miniature deferred-execution framework living under INTERNAL_PREFIX.
# Compiled with its own module name and file name, so captured frames look
# exactly like frames of an installed framework package.
STAGE_MODULE = "flowkit.core.stage"
STAGE_FILENAME = "/site-packages/flowkit/core/stage.py"
STAGE_SOURCE = """\
class Stage:
    def __init__(self, capturer):
        self.capturer = capturer
        self.assembly = None

    def map(self, fn):
        return self._assemble()

    def filter(self, fn):
        return self.map(fn)

    def _assemble(self):
        self.assembly = self.capturer()
        return self
"""


@pytest.fixture(autouse=True)
def reset_trace_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate process-wide settings, selector and logging between tests."""
    monkeypatch.delenv("ASSEMBLY_TRACE_INTERNAL_PREFIX", raising=False)
    monkeypatch.delenv("ASSEMBLY_TRACE_FULL_STACKTRACE", raising=False)
    reset_settings()
    monkeypatch.setattr(CaptureStrategySelector, "_instance", None)
    yield
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def sample_trace() -> str:
    """Load a rendered trace with framework frames above user frames."""
    return (TRACES_DIR / "mixed.txt").read_text(encoding="utf-8")


@pytest.fixture
def internal_prefix() -> str:
    """Return the internal namespace prefix of the test framework."""
    return INTERNAL_PREFIX


@pytest.fixture
def classifier() -> FrameClassifier:
    """Create a classifier for the test framework namespace."""
    return FrameClassifier(INTERNAL_PREFIX)


@pytest.fixture
def stage_class() -> type[Any]:
    """Compile the miniature framework and return its Stage class."""
    namespace: dict[str, Any] = {"__name__": STAGE_MODULE}
    exec(compile(STAGE_SOURCE, STAGE_FILENAME, "exec"), namespace)  # noqa: S102
    stage: type[Any] = namespace["Stage"]
    return stage
