"""Exceptions for project file operations."""

from patch_gate.models import ValidationResult
from patch_gate.validation.exceptions import PatchGateError


class PatchRejectedError(PatchGateError):
    """Raised when a patch fails validation and nothing was applied."""

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        count = len(result.errors)
        super().__init__(f"Patch rejected with {count} validation error(s)")
