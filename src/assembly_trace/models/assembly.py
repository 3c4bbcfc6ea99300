"""Immutable assembly-site description attached to deferred stages."""

from __future__ import annotations

from dataclasses import dataclass

CALL_SITE_GLUE = " ⇢ "
NO_ASSEMBLY_INFORMATION = "[no operator assembly information]"


def drop_internal_prefix(line: str, internal_prefix: str | None = None) -> str:
    """Remove the internal namespace prefix from the front of a line, if present."""
    if internal_prefix is None:
        from assembly_trace.config.loader import get_settings

        internal_prefix = get_settings().internal_prefix
    return line[len(internal_prefix) :] if line.startswith(internal_prefix) else line


def operator_label(
    operator_stack_frame: str,
    user_code_stack_frame: str,
    internal_prefix: str | None = None,
) -> str:
    """Render ``Api.name ⇢ at user.code.frame(file.py:12)``.

    The operator frame loses its location suffix and internal prefix. A frame
    with no ``'('`` (or one starting with it) is used whole.
    """
    paren = operator_stack_frame.find("(")
    api_line = operator_stack_frame[:paren] if paren > 0 else operator_stack_frame
    return (
        drop_internal_prefix(api_line, internal_prefix)
        + CALL_SITE_GLUE
        + "at "
        + user_code_stack_frame
    )


@dataclass(frozen=True, slots=True)
class AssemblyInformation:
    """Where a deferred stage was assembled.

    Only created through the factory classmethods; never mutated.

    Attributes:
        operator_stack_frame: Deepest internal frame adjacent to user code
        user_code_stack_frame: First non-internal frame (or the operator
            label itself when no user frame was found)
        operator: Final single-line label
    """

    operator_stack_frame: str | None
    user_code_stack_frame: str | None
    operator: str

    @classmethod
    def empty(cls) -> AssemblyInformation:
        """No frames were available."""
        return cls(None, None, NO_ASSEMBLY_INFORMATION)

    @classmethod
    def from_stack_frame(cls, user_code_stack_frame: str) -> AssemblyInformation:
        """The first observed frame was already user code."""
        return cls(None, user_code_stack_frame, user_code_stack_frame)

    @classmethod
    def from_stack_frames(
        cls,
        operator_stack_frame: str,
        user_code_stack_frame: str,
        internal_prefix: str | None = None,
    ) -> AssemblyInformation:
        """An internal frame followed by the user frame that called it."""
        return cls(
            operator_stack_frame,
            user_code_stack_frame,
            operator_label(operator_stack_frame, user_code_stack_frame, internal_prefix),
        )

    @classmethod
    def from_stack_trace_tail(
        cls,
        source: str,
        internal_prefix: str | None = None,
    ) -> AssemblyInformation:
        """Build from the last two lines of an already-trimmed trace tail.

        No classification happens here: the penultimate line is taken as the
        operator frame and the last line as the user frame. A single line is
        treated as a lone user frame.

        Args:
            source: Newline-separated tail of a rendered stack trace
            internal_prefix: Prefix to drop from the operator frame

        Returns:
            AssemblyInformation for the tail
        """
        tail = source.rstrip("\n")
        if not tail.strip():
            return cls.empty()
        final_newline = tail.rfind("\n")
        if final_newline < 0:
            return cls.from_stack_frame(tail.strip())

        user_code_stack_frame = tail[final_newline + 1 :]
        penultimate_newline = tail.rfind("\n", 0, final_newline)
        operator_stack_frame = tail[penultimate_newline + 1 : final_newline]
        return cls.from_stack_frames(
            operator_stack_frame.strip(),
            user_code_stack_frame.strip(),
            internal_prefix,
        )

    @classmethod
    def from_operator(cls, operator: str) -> AssemblyInformation:
        """Only internal frames were seen; ``operator`` is already rendered."""
        return cls(None, operator, operator)

    def as_stack_trace(self) -> str:
        """Render the known frames as tab-indented stack lines."""
        return "".join(
            f"\t{frame}\n"
            for frame in (self.operator_stack_frame, self.user_code_stack_frame)
            if frame is not None
        )

    def __str__(self) -> str:
        return self.operator
