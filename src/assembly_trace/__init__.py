"""Assembly-site resolution for deferred computations.

Capture where a stage was assembled, so that a failure at execution time
can point back at the code that built it::

    capturer = obtain_capturer()
    info = capturer()
    info.operator  # "Stage.map ⇢ at my.app.Handler.run(handler.py:10)"
"""

from assembly_trace._version import __version__
from assembly_trace.core import (
    CaptureStrategySelector,
    FrameClassifier,
    StackLineView,
    extract_operator_assembly_information,
    extract_operator_assembly_information_parts,
    initialize,
    is_user_code,
    obtain_capturer,
    should_sanitize,
)
from assembly_trace.models import (
    CALL_SITE_GLUE,
    NO_ASSEMBLY_INFORMATION,
    AssemblyInformation,
    FrameRecord,
)
from assembly_trace.utils.errors import (
    AssemblyTraceError,
    CaptureStrategyError,
    StackLineViewError,
)

__all__ = [
    "CALL_SITE_GLUE",
    "NO_ASSEMBLY_INFORMATION",
    "AssemblyInformation",
    "AssemblyTraceError",
    "CaptureStrategyError",
    "CaptureStrategySelector",
    "FrameClassifier",
    "FrameRecord",
    "StackLineView",
    "StackLineViewError",
    "__version__",
    "extract_operator_assembly_information",
    "extract_operator_assembly_information_parts",
    "initialize",
    "is_user_code",
    "obtain_capturer",
    "should_sanitize",
]
