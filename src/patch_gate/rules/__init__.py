"""Path and unsafe-code rule tables."""

from patch_gate.rules.path_rules import ALLOWED_EXTENSIONS, FORBIDDEN_PATH_RULES
from patch_gate.rules.rule_engine import (
    ForbiddenPathRule,
    UnsafeCodeRule,
    find_forbidden_rule,
    match_unsafe_rules,
)
from patch_gate.rules.unsafe_code_rules import UNSAFE_CODE_RULES

__all__ = [
    "ALLOWED_EXTENSIONS",
    "FORBIDDEN_PATH_RULES",
    "UNSAFE_CODE_RULES",
    "ForbiddenPathRule",
    "UnsafeCodeRule",
    "find_forbidden_rule",
    "match_unsafe_rules",
]
