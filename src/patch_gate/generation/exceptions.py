"""Exceptions for patch generation."""

from patch_gate.validation.exceptions import PatchGateError


class GenerationError(PatchGateError):
    """Raised when the code-generation provider cannot produce a response."""
