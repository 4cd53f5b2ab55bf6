"""Data models for the patch gate."""

from patch_gate.models.patch_models import (
    FileAction,
    FileOperation,
    Patch,
    PatchViolation,
    ValidationResult,
)
from patch_gate.models.report_models import (
    GenerationResult,
    PatchPreviewEntry,
    ProjectFile,
    UnsafeCodeWarning,
)

__all__ = [
    "FileAction",
    "FileOperation",
    "GenerationResult",
    "Patch",
    "PatchPreviewEntry",
    "PatchViolation",
    "ProjectFile",
    "UnsafeCodeWarning",
    "ValidationResult",
]
