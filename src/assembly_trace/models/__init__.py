"""Data models and value objects."""

from .assembly import CALL_SITE_GLUE, NO_ASSEMBLY_INFORMATION, AssemblyInformation
from .frame import FrameRecord

__all__ = [
    "CALL_SITE_GLUE",
    "NO_ASSEMBLY_INFORMATION",
    "AssemblyInformation",
    "FrameRecord",
]
