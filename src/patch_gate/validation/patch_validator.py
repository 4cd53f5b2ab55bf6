"""Patch validator: structural and security checks on AI-proposed patches."""

import logging
import re
from collections.abc import Mapping
from typing import Any

from patch_gate.models import FileAction, Patch, PatchViolation, ValidationResult
from patch_gate.rules import find_forbidden_rule
from patch_gate.validation.policy import PatchPolicy

logger = logging.getLogger(__name__)

VALID_ACTIONS = frozenset(action.value for action in FileAction)

# Control characters other than tab, newline and carriage return
_BINARY_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]")


class PatchValidator:
    """Decides whether a whole patch may be applied.

    Stateless apart from its policy; a single instance can be shared
    across threads.
    """

    def __init__(self, policy: PatchPolicy | None = None) -> None:
        """Initialize with optional policy override (defaults to PatchPolicy())."""
        self.policy: PatchPolicy = policy if policy is not None else PatchPolicy()

    def validate(self, patch: Patch | Mapping[str, Any] | Any) -> ValidationResult:
        """Validate every operation in a patch.

        Patch-level problems (no files array, too many files) fail fast
        with a single error. Per-file problems are accumulated so the
        caller sees all of them at once.

        Args:
            patch: A Patch model or the raw mapping parsed from model output.

        Returns:
            ValidationResult with valid=True iff no errors were found.
        """
        files = _get_field(patch, "files")
        if not isinstance(files, (list, tuple)):
            return _reject("Invalid patch format: missing files array")

        max_files = self.policy.max_files_per_patch
        if len(files) > max_files:
            return _reject(f"Too many files in patch (max {max_files})")

        errors: list[PatchViolation] = []
        seen_paths: set[str] = set()

        for entry in files:
            path = _get_field(entry, "path")
            if not path or not isinstance(path, str):
                errors.append(PatchViolation(path="", error="File entry missing path"))
                continue

            action = _action_value(_get_field(entry, "action"))
            if not isinstance(action, str) or action not in VALID_ACTIONS:
                errors.append(PatchViolation(path=path, error=f"Invalid action: {action}"))
                continue

            if path in seen_paths:
                errors.append(PatchViolation(path=path, error="Duplicate path in patch"))
                continue
            seen_paths.add(path)

            path_error = self.validate_file_path(path)
            if path_error:
                errors.append(PatchViolation(path=path, error=path_error))

            content = _get_field(entry, "content")
            content_error = self.validate_file_content(
                content if isinstance(content, str) else None,
                action,
            )
            if content_error:
                errors.append(PatchViolation(path=path, error=content_error))

        if errors:
            logger.debug("Rejected patch with %d error(s)", len(errors))
        return ValidationResult(valid=not errors, errors=errors)

    def validate_file_path(self, path: str) -> str | None:
        """Return a rejection reason for the path, or None if acceptable.

        Checks run in order and the first failure is returned: forbidden
        pattern, extension, null bytes, length.
        """
        if find_forbidden_rule(path, self.policy.forbidden_path_rules) is not None:
            return f'Path "{path}" contains forbidden pattern'

        dot = path.rfind(".")
        ext = path[dot:] if dot != -1 else ""
        if not ext or ext.lower() not in self.policy.allowed_extensions:
            return f'File extension "{ext}" is not allowed'

        if "\0" in path:
            return "Path contains null bytes"

        max_length = self.policy.max_path_length
        if len(path) > max_length:
            return f"Path too long (max {max_length} characters)"

        return None

    def validate_file_content(
        self,
        content: str | None,
        action: FileAction | str,
    ) -> str | None:
        """Return a rejection reason for the content, or None if acceptable.

        Content is irrelevant for deletions.
        """
        action = _action_value(action)
        if action == FileAction.DELETE.value:
            return None

        if not content:
            return f"Content is required for {action} action"

        max_size = self.policy.max_file_size
        if len(content) > max_size:
            return f"File content exceeds maximum size ({max_size} bytes)"

        if _BINARY_CHARS.search(content):
            return "File appears to contain binary content"

        return None


def _get_field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _action_value(action: Any) -> Any:
    if isinstance(action, FileAction):
        return action.value
    return action


def _reject(message: str) -> ValidationResult:
    logger.debug("Rejected patch: %s", message)
    return ValidationResult(valid=False, errors=[PatchViolation(path="", error=message)])


_default_validator = PatchValidator()


def validate_patch(patch: Patch | Mapping[str, Any] | Any) -> ValidationResult:
    """Validate a patch against the default policy."""
    return _default_validator.validate(patch)


def validate_file_path(path: str) -> str | None:
    """Validate a single path against the default policy."""
    return _default_validator.validate_file_path(path)


def validate_file_content(content: str | None, action: FileAction | str) -> str | None:
    """Validate a single file's content against the default policy."""
    return _default_validator.validate_file_content(content, action)
