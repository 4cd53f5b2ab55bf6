"""Rule engine for path and code-content checks."""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict


class ForbiddenPathRule(BaseModel):
    """A path shape that is rejected outright.

    ``match`` selects how ``value`` is applied to the path:
    ``contains`` is a substring test, ``prefix`` a startswith test and
    ``regex`` an anchored-or-not ``re.search``.
    """

    model_config = ConfigDict(frozen=True)

    rule_id: str
    description: str
    match: Literal["contains", "prefix", "regex"]
    value: str

    def matches(self, path: str) -> bool:
        if self.match == "contains":
            return self.value in path
        if self.match == "prefix":
            return path.startswith(self.value)
        return re.search(self.value, path) is not None


class UnsafeCodeRule(BaseModel):
    """A suspicious code construct reported as an advisory warning."""

    model_config = ConfigDict(frozen=True)

    rule_id: str
    category: str
    pattern: str
    message: str

    def matches(self, content: str) -> bool:
        return re.search(self.pattern, content) is not None


def find_forbidden_rule(
    path: str,
    rules: list[ForbiddenPathRule] | tuple[ForbiddenPathRule, ...] | None = None,
) -> ForbiddenPathRule | None:
    """Return the first rule the path violates, or None.

    Args:
        path: Candidate repository-relative path
        rules: Rule table to check (defaults to FORBIDDEN_PATH_RULES)

    Returns:
        The first matching ForbiddenPathRule in table order
    """
    if rules is None:
        from patch_gate.rules.path_rules import FORBIDDEN_PATH_RULES

        rules = FORBIDDEN_PATH_RULES

    for rule in rules:
        if rule.matches(path):
            return rule
    return None


def match_unsafe_rules(
    content: str,
    rules: list[UnsafeCodeRule] | tuple[UnsafeCodeRule, ...] | None = None,
) -> list[UnsafeCodeRule]:
    """Return every rule matching the content, in table order.

    A rule appears at most once no matter how often it matches.
    """
    if rules is None:
        from patch_gate.rules.unsafe_code_rules import UNSAFE_CODE_RULES

        rules = UNSAFE_CODE_RULES

    return [rule for rule in rules if rule.matches(content)]
