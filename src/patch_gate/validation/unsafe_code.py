"""Unsafe-code scanner: advisory warnings for suspicious constructs.

Warnings never make a patch invalid. They are shown to the person
reviewing the patch before they accept it.
"""

from collections.abc import Mapping
from typing import Any

from patch_gate.models import FileAction, Patch, UnsafeCodeWarning
from patch_gate.rules import UNSAFE_CODE_RULES, UnsafeCodeRule, match_unsafe_rules


class UnsafeCodeScanner:
    """Matches file content against an ordered table of UnsafeCodeRules."""

    def __init__(self, rules: list[UnsafeCodeRule] | None = None) -> None:
        self._rules: tuple[UnsafeCodeRule, ...] = (
            tuple(rules) if rules is not None else UNSAFE_CODE_RULES
        )

    def detect(self, content: str) -> list[str]:
        """Return one message per matched rule, in rule-table order."""
        return [rule.message for rule in match_unsafe_rules(content, self._rules)]

    def scan_patch(self, patch: Patch | Mapping[str, Any]) -> list[UnsafeCodeWarning]:
        """Collect warnings for every operation that carries content.

        Deletions are skipped. Entries are visited in patch order.
        """
        if isinstance(patch, Patch):
            entries = [op.model_dump(mode="json") for op in patch.files]
        else:
            entries = patch.get("files") or []

        warnings: list[UnsafeCodeWarning] = []
        for entry in entries:
            if not isinstance(entry, Mapping):
                continue
            content = entry.get("content")
            if entry.get("action") == FileAction.DELETE.value or not isinstance(content, str):
                continue
            path = entry.get("path") or ""
            for rule in match_unsafe_rules(content, self._rules):
                warnings.append(
                    UnsafeCodeWarning(path=path, rule_id=rule.rule_id, message=rule.message)
                )
        return warnings


_default_scanner = UnsafeCodeScanner()


def detect_unsafe_code(content: str) -> list[str]:
    """Return warning messages for a single file's content."""
    return _default_scanner.detect(content)


def scan_patch(patch: Patch | Mapping[str, Any]) -> list[UnsafeCodeWarning]:
    """Return per-file warnings for a whole patch."""
    return _default_scanner.scan_patch(patch)
