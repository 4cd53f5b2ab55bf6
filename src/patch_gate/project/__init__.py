"""Project file collection for accepted patches."""

from patch_gate.project.exceptions import PatchRejectedError
from patch_gate.project.file_store import ProjectFileStore

__all__ = [
    "PatchRejectedError",
    "ProjectFileStore",
]
