"""Advisory rules for suspicious constructs in generated code."""

from patch_gate.rules.rule_engine import UnsafeCodeRule

UNSAFE_CODE_RULES: tuple[UnsafeCodeRule, ...] = (
    UnsafeCodeRule(
        rule_id="eval-call",
        category="Dynamic code execution",
        pattern=r"eval\s*\(",
        message="Use of eval() detected",
    ),
    UnsafeCodeRule(
        rule_id="function-constructor",
        category="Dynamic code execution",
        pattern=r"new\s+Function\s*\(",
        message="Dynamic Function constructor detected",
    ),
    UnsafeCodeRule(
        rule_id="child-process",
        category="Process access",
        pattern=r"child_process",
        message="child_process import detected",
    ),
    UnsafeCodeRule(
        rule_id="fs-write",
        category="File system access",
        pattern=r"fs\.(write|unlink|rmdir|rm)",
        message="File system write operations detected",
    ),
    UnsafeCodeRule(
        rule_id="env-access",
        category="Environment exfiltration",
        pattern=r"process\.env",
        message="Environment variable access detected",
    ),
    UnsafeCodeRule(
        rule_id="dynamic-require",
        category="Module loading",
        pattern=r"require\s*\(\s*['\"][^'\"]+['\"]\s*\)",
        message="Dynamic require detected",
    ),
    UnsafeCodeRule(
        rule_id="dynamic-import",
        category="Module loading",
        pattern=r"import\s*\(\s*[^)]+\)",
        message="Dynamic import detected",
    ),
    UnsafeCodeRule(
        rule_id="node-path-globals",
        category="File system layout",
        pattern=r"__dirname|__filename",
        message="Node.js path globals detected",
    ),
    UnsafeCodeRule(
        rule_id="process-exec",
        category="Process access",
        pattern=r"\.exec\s*\(|\.spawn\s*\(",
        message="Process execution detected",
    ),
    UnsafeCodeRule(
        rule_id="dangerously-set-inner-html",
        category="DOM injection",
        pattern=r"dangerouslySetInnerHTML",
        message="React dangerouslySetInnerHTML detected",
    ),
    UnsafeCodeRule(
        rule_id="inner-html-assignment",
        category="DOM injection",
        pattern=r"innerHTML\s*=",
        message="Direct innerHTML assignment detected",
    ),
)
