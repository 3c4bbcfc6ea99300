"""Assembly-site resolution.

This module exports:
- FrameClassifier: internal vs. user frame predicates and the sanitize table
- StackLineView: windowed views over rendered stack lines
- extract_operator_assembly_information: labels from rendered stack text
- FrameWalkBackend / InspectStackBackend: live stack capture
- CaptureStrategySelector / obtain_capturer: process-wide backend choice
"""

from assembly_trace.core.backends import FrameWalkBackend, InspectStackBackend, walk_frames
from assembly_trace.core.classifier import (
    FrameClassifier,
    default_classifier,
    is_user_code,
    should_sanitize,
)
from assembly_trace.core.extractor import (
    extract_operator_assembly_information,
    extract_operator_assembly_information_parts,
)
from assembly_trace.core.selector import (
    DEFAULT_CANDIDATES,
    CaptureStrategySelector,
    initialize,
    obtain_capturer,
)
from assembly_trace.core.stack_line import StackLineView, trimmed_nonempty_lines

__all__ = [
    "DEFAULT_CANDIDATES",
    "CaptureStrategySelector",
    "FrameClassifier",
    "FrameWalkBackend",
    "InspectStackBackend",
    "StackLineView",
    "default_classifier",
    "extract_operator_assembly_information",
    "extract_operator_assembly_information_parts",
    "initialize",
    "is_user_code",
    "obtain_capturer",
    "should_sanitize",
    "trimmed_nonempty_lines",
    "walk_frames",
]
