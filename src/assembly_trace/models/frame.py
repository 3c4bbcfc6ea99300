"""Data model for a single captured stack frame."""

from __future__ import annotations

import os
from dataclasses import dataclass
from types import FrameType


@dataclass(frozen=True, slots=True)
class FrameRecord:
    """One entry of a captured call stack.

    Rendered as ``module.qualname(file.py:line)``, the single-line form used
    by the classifier, the text extractor and assembly labels.
    """

    module: str
    qualname: str
    filename: str
    line_number: int

    @classmethod
    def from_frame(cls, frame: FrameType, line_number: int | None = None) -> FrameRecord:
        """Build a record from a live interpreter frame.

        Args:
            frame: Frame to describe
            line_number: Line to report instead of ``frame.f_lineno``

        Returns:
            FrameRecord for the frame
        """
        code = frame.f_code
        return cls(
            module=frame.f_globals.get("__name__") or "<unknown>",
            qualname=code.co_qualname,
            filename=code.co_filename,
            line_number=frame.f_lineno if line_number is None else line_number,
        )

    @property
    def qualified_name(self) -> str:
        """Namespace-qualified symbol, e.g. ``my.app.Handler.run``."""
        return f"{self.module}.{self.qualname}"

    def __str__(self) -> str:
        return (
            f"{self.module}.{self.qualname}"
            f"({os.path.basename(self.filename)}:{self.line_number})"
        )
