"""Tests for the patch gate exception hierarchy."""

from patch_gate.generation import GenerationError
from patch_gate.models import PatchViolation, ValidationResult
from patch_gate.project import PatchRejectedError
from patch_gate.validation import PatchGateError, PolicyConfigError


class TestPatchGateExceptions:
    """Tests for exception hierarchy."""

    def test_patch_gate_error_exists(self):
        exc = PatchGateError("Base error")
        assert isinstance(exc, Exception)
        assert str(exc) == "Base error"

    def test_policy_config_error_inherits_from_base(self):
        exc = PolicyConfigError("bad ceiling")
        assert isinstance(exc, PatchGateError)
        assert str(exc) == "bad ceiling"

    def test_generation_error_inherits_from_base(self):
        exc = GenerationError("No response from AI")
        assert isinstance(exc, PatchGateError)
        assert str(exc) == "No response from AI"

    def test_patch_rejected_error_carries_result(self):
        result = ValidationResult(
            valid=False,
            errors=[
                PatchViolation(path="../a.ts", error='Path "../a.ts" contains forbidden pattern'),
                PatchViolation(path="src/b.ts", error="Content is required for create action"),
            ],
        )
        exc = PatchRejectedError(result)
        assert isinstance(exc, PatchGateError)
        assert exc.result is result
        assert str(exc) == "Patch rejected with 2 validation error(s)"
