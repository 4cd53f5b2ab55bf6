"""Path helpers for display and deduplication."""


def normalize_path(path: str) -> str:
    """Canonicalize a path for display.

    Strips leading slashes and drops empty, "." and ".." segments. This
    is lossy: never use it to make an untrusted path safe. Traversal is
    rejected by PatchValidator.validate_file_path instead.

    Args:
        path: Raw path string, e.g. "/src//./game/config.ts".

    Returns:
        Slash-joined path, e.g. "src/game/config.ts".
    """
    parts = [part for part in path.lstrip("/").split("/") if part not in ("", ".", "..")]
    return "/".join(parts)
