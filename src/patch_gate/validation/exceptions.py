"""Exceptions for patch gate operations.

Note: Names chosen to avoid collisions with pydantic.ValidationError.
"""


class PatchGateError(Exception):
    """Base exception for all patch gate operations."""


class PolicyConfigError(PatchGateError):
    """Raised when a patch policy setting is malformed."""
