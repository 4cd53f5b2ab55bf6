"""Tests for path and unsafe-code rule tables and the rule engine."""

import pytest
from pydantic import ValidationError

from patch_gate.rules import (
    ALLOWED_EXTENSIONS,
    FORBIDDEN_PATH_RULES,
    UNSAFE_CODE_RULES,
    ForbiddenPathRule,
    UnsafeCodeRule,
    find_forbidden_rule,
    match_unsafe_rules,
)


class TestForbiddenPathRules:
    """Tests for FORBIDDEN_PATH_RULES."""

    def test_rule_order(self):
        assert [rule.rule_id for rule in FORBIDDEN_PATH_RULES] == [
            "path-traversal",
            "absolute-path",
            "node-modules",
            "env-file",
            "git-dir",
            "next-build",
            "prisma-migrations",
        ]

    def test_all_rule_ids_are_unique(self):
        rule_ids = [rule.rule_id for rule in FORBIDDEN_PATH_RULES]
        assert len(rule_ids) == len(set(rule_ids)), "Duplicate rule IDs found"

    @pytest.mark.parametrize(
        "path, rule_id",
        [
            ("src/../../etc/passwd", "path-traversal"),
            ("/etc/passwd", "absolute-path"),
            ("D:\\games\\main.ts", "absolute-path"),
            ("node_modules/react/index.js", "node-modules"),
            (".env.local", "env-file"),
            (".git/HEAD", "git-dir"),
            (".next/cache.json", "next-build"),
            ("prisma/migrations/init.json", "prisma-migrations"),
        ],
    )
    def test_find_forbidden_rule_names_the_rule(self, path, rule_id):
        assert find_forbidden_rule(path).rule_id == rule_id

    def test_traversal_wins_over_absolute(self):
        """The first rule in table order is reported."""
        assert find_forbidden_rule("/../etc/passwd").rule_id == "path-traversal"

    def test_traversal_is_a_substring_match(self):
        assert find_forbidden_rule("src/a..b.ts").rule_id == "path-traversal"

    def test_safe_path_matches_nothing(self):
        assert find_forbidden_rule("src/game/config.ts") is None

    def test_drive_letter_needs_backslash(self):
        assert find_forbidden_rule("C:/Windows/win.ini") is None

    def test_explicit_rule_table(self):
        rule = ForbiddenPathRule(rule_id="x", description="x", match="contains", value="secret")
        assert find_forbidden_rule("src/secret.ts", [rule]) is rule
        assert find_forbidden_rule("../a.ts", [rule]) is None

    def test_rejects_unknown_match_kind(self):
        with pytest.raises(ValidationError):
            ForbiddenPathRule(rule_id="x", description="x", match="glob", value="*")


class TestAllowedExtensions:
    def test_allowed_extensions(self):
        assert set(ALLOWED_EXTENSIONS) == {
            ".ts", ".tsx", ".js", ".jsx", ".json", ".css",
            ".scss", ".md", ".txt", ".html", ".svg",
        }

    def test_extensions_are_lowercase_with_dot(self):
        for ext in ALLOWED_EXTENSIONS:
            assert ext.startswith(".")
            assert ext == ext.lower()


class TestUnsafeCodeRules:
    def test_all_rules_have_required_fields(self):
        for rule in UNSAFE_CODE_RULES:
            assert rule.rule_id
            assert rule.category
            assert rule.pattern
            assert rule.message

    def test_all_rule_ids_are_unique(self):
        rule_ids = [rule.rule_id for rule in UNSAFE_CODE_RULES]
        assert len(rule_ids) == len(set(rule_ids))

    def test_match_unsafe_rules_returns_rules_in_table_order(self):
        matched = match_unsafe_rules("innerHTML = eval(x)")
        assert [rule.rule_id for rule in matched] == ["eval-call", "inner-html-assignment"]

    def test_rules_are_immutable(self):
        rule = UNSAFE_CODE_RULES[0]
        with pytest.raises(ValidationError):
            rule.pattern = ".*"

    def test_rules_are_unsafe_code_rule_instances(self):
        for rule in UNSAFE_CODE_RULES:
            assert isinstance(rule, UnsafeCodeRule)
