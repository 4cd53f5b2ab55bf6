"""Patch validation, unsafe-code scanning and path normalization."""

from patch_gate.validation.exceptions import PatchGateError, PolicyConfigError
from patch_gate.validation.patch_validator import (
    PatchValidator,
    validate_file_content,
    validate_file_path,
    validate_patch,
)
from patch_gate.validation.paths import normalize_path
from patch_gate.validation.policy import PatchPolicy
from patch_gate.validation.unsafe_code import (
    UnsafeCodeScanner,
    detect_unsafe_code,
    scan_patch,
)

__all__ = [
    "PatchGateError",
    "PatchPolicy",
    "PatchValidator",
    "PolicyConfigError",
    "UnsafeCodeScanner",
    "detect_unsafe_code",
    "normalize_path",
    "scan_patch",
    "validate_file_content",
    "validate_file_path",
    "validate_patch",
]
