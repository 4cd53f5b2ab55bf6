"""Utilities for rendering patch operations as unified diffs."""

import difflib
from collections.abc import Mapping

from patch_gate.models import FileAction, Patch, PatchPreviewEntry


def generate_unified_diff(
    file_path: str,
    original_content: str,
    modified_content: str,
) -> str:
    """Generate a git-style unified diff.

    Args:
        file_path: Relative path from project root (e.g. "src/game/main.ts").
        original_content: File content before the patch.
        modified_content: File content after the patch.

    Returns:
        Unified diff string with a/ b/ prefixes. Empty string if no changes.
    """
    if original_content == modified_content:
        return ""

    original_lines = original_content.splitlines(keepends=True)
    modified_lines = modified_content.splitlines(keepends=True)

    diff_gen = difflib.unified_diff(
        original_lines,
        modified_lines,
        fromfile=f"a/{file_path}",
        tofile=f"b/{file_path}",
        lineterm="",
    )

    # Content lines keep their newline (keepends=True); header lines do not
    return "\n".join(line.rstrip("\n") for line in diff_gen)


def preview_patch(
    patch: Patch,
    current_files: Mapping[str, str],
) -> list[PatchPreviewEntry]:
    """Render each operation of a patch against the project's current files.

    Creates diff against an empty file, deletions diff the current
    content against empty. Entries keep the patch order.
    """
    entries: list[PatchPreviewEntry] = []
    for op in patch.files:
        original = current_files.get(op.path, "")
        if op.action == FileAction.DELETE:
            modified = ""
        else:
            modified = op.content or ""
        entries.append(
            PatchPreviewEntry(
                path=op.path,
                action=op.action,
                diff=generate_unified_diff(op.path, original, modified),
            )
        )
    return entries
