"""Tests for diff_generator utility functions."""

from patch_gate.models import FileAction, FileOperation, Patch
from patch_gate.utils.diff_generator import generate_unified_diff, preview_patch


def test_generate_unified_diff_basic():
    """Basic diff has --- a/ and +++ b/ headers and changed lines."""
    diff = generate_unified_diff(
        "src/game/config.ts",
        "export const width = 800;\n",
        "export const width = 1024;\n",
    )
    assert diff.startswith("--- a/src/game/config.ts")
    assert "+++ b/src/game/config.ts" in diff
    assert "-export const width = 800;" in diff
    assert "+export const width = 1024;" in diff


def test_generate_unified_diff_no_changes():
    """Identical content returns empty string."""
    assert generate_unified_diff("a.ts", "hello\n", "hello\n") == ""


def test_generate_unified_diff_multiline():
    original = "line1\nline2\nline3\n"
    modified = "line1\nchanged\nline3\n"
    diff = generate_unified_diff("f.ts", original, modified)
    assert "-line2" in diff
    assert "+changed" in diff
    assert "\n\n" not in diff


def test_preview_patch(project_files):
    patch = Patch(files=[
        FileOperation(path="src/game/new.ts", action=FileAction.CREATE, content="export {};\n"),
        FileOperation(
            path="src/game/config.ts",
            action=FileAction.UPDATE,
            content=project_files["src/game/config.ts"],
        ),
        FileOperation(path="src/game/old.ts", action=FileAction.DELETE),
    ])
    entries = preview_patch(patch, project_files)

    assert [e.path for e in entries] == ["src/game/new.ts", "src/game/config.ts", "src/game/old.ts"]
    assert "+export {};" in entries[0].diff
    assert entries[1].diff == ""
    assert entries[2].action is FileAction.DELETE
    assert "-export const legacy = true;" in entries[2].diff
