"""Path rules: forbidden shapes and the extension allow-list."""

from patch_gate.rules.rule_engine import ForbiddenPathRule

# Checked in order; traversal and absolute paths come first so that
# "../../etc/passwd.ts" never reaches the extension check.
FORBIDDEN_PATH_RULES: tuple[ForbiddenPathRule, ...] = (
    ForbiddenPathRule(
        rule_id="path-traversal",
        description="Parent directory reference",
        match="contains",
        value="..",
    ),
    ForbiddenPathRule(
        rule_id="absolute-path",
        description="POSIX root or Windows drive prefix",
        match="regex",
        value=r"^/|^[A-Za-z]:\\",
    ),
    ForbiddenPathRule(
        rule_id="node-modules",
        description="Installed dependencies",
        match="prefix",
        value="node_modules/",
    ),
    ForbiddenPathRule(
        rule_id="env-file",
        description="Environment files such as .env.local",
        match="prefix",
        value=".env",
    ),
    ForbiddenPathRule(
        rule_id="git-dir",
        description="Git metadata",
        match="prefix",
        value=".git/",
    ),
    ForbiddenPathRule(
        rule_id="next-build",
        description="Next.js build output",
        match="prefix",
        value=".next/",
    ),
    ForbiddenPathRule(
        rule_id="prisma-migrations",
        description="Database migrations",
        match="prefix",
        value="prisma/migrations/",
    ),
)

ALLOWED_EXTENSIONS: tuple[str, ...] = (
    ".ts",
    ".tsx",
    ".js",
    ".jsx",
    ".json",
    ".css",
    ".scss",
    ".md",
    ".txt",
    ".html",
    ".svg",
)
