"""Utilities for the patch gate."""

from patch_gate.utils.diff_generator import generate_unified_diff, preview_patch

__all__ = [
    "generate_unified_diff",
    "preview_patch",
]
