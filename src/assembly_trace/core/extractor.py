"""Assembly-site extraction from already rendered stack text.

Most operators end up as ``"Stage.map ⇢ at my.app.Handler.run(handler.py:10)"``:

1. The top of the stack is scanned for internal API frames and the deepest
   one is kept, since several adjacent API frames usually mean an alias
   operator delegating to another (``Stage.map``).
2. The next line is the user code that called it, appended after the glue
   with an ``at`` marker.
3. When no user code is found, the last API line is shown whole.
4. When there are no lines at all, the no-information label is returned.
"""

from __future__ import annotations

from assembly_trace.core.classifier import FrameClassifier, default_classifier
from assembly_trace.core.stack_line import trimmed_nonempty_lines
from assembly_trace.models.assembly import CALL_SITE_GLUE, NO_ASSEMBLY_INFORMATION


def extract_operator_assembly_information_parts(
    source: str,
    classifier: FrameClassifier | None = None,
) -> list[str]:
    """Split a rendered stack into zero, one or two label segments.

    Args:
        source: Newline-separated stack lines, optionally indented
        classifier: Classifier to use instead of the configured default

    Returns:
        ``[]`` for blank input, ``[line]`` when there is no internal/user
        boundary, otherwise ``[api, "at " + user_line]``
    """
    classifier = classifier or default_classifier()
    lines = trimmed_nonempty_lines(source)

    current = next(lines, None)
    if current is None:
        return []

    if current.is_user_code(classifier):
        # No internal API line at the top.
        return [current.to_text()]

    for line in lines:
        previous, current = current, line
        if current.is_user_code(classifier):
            api = previous.without_location_suffix().without_internal_prefix(classifier)
            return [api.to_text(), "at " + current.to_text()]

    # Every line was internal; show the deepest one in full.
    return [current.without_internal_prefix(classifier).to_text()]


def extract_operator_assembly_information(
    source: str,
    classifier: FrameClassifier | None = None,
) -> str:
    """Render the assembly label for a rendered stack.

    Args:
        source: Newline-separated stack lines, optionally indented
        classifier: Classifier to use instead of the configured default

    Returns:
        Single-line label, e.g. ``"Stage.filter ⇢ at my.app.run(app.py:2)"``
    """
    parts = extract_operator_assembly_information_parts(source, classifier)
    if not parts:
        return NO_ASSEMBLY_INFORMATION
    return CALL_SITE_GLUE.join(parts)
