"""In-memory project file collection that accepts validated patches."""

import logging
from collections.abc import Iterable, Mapping

from patch_gate.models import FileAction, Patch, ProjectFile, ValidationResult
from patch_gate.project.exceptions import PatchRejectedError
from patch_gate.validation import PatchValidator

logger = logging.getLogger(__name__)


class ProjectFileStore:
    """Holds a project's files and applies patches all-or-nothing.

    Not thread-safe; callers serialize writes.
    """

    def __init__(
        self,
        files: Mapping[str, str] | Iterable[ProjectFile] | None = None,
        validator: PatchValidator | None = None,
    ) -> None:
        self._validator: PatchValidator = validator if validator is not None else PatchValidator()
        self._files: dict[str, str] = {}
        if isinstance(files, Mapping):
            self._files.update(files)
        elif files is not None:
            for project_file in files:
                self._files[project_file.path] = project_file.content

    @property
    def files(self) -> dict[str, str]:
        return dict(self._files)

    def get(self, path: str) -> str | None:
        return self._files.get(path)

    def list_files(self) -> list[ProjectFile]:
        return [ProjectFile(path=path, content=content) for path, content in sorted(self._files.items())]

    def __contains__(self, path: object) -> bool:
        return path in self._files

    def __len__(self) -> int:
        return len(self._files)

    def apply_patch(self, patch: Patch) -> ValidationResult:
        """Validate and apply a patch.

        Create and update both write content: updating a missing file
        creates it and creating an existing file overwrites it. Deleting
        a missing file is a no-op.

        Args:
            patch: Patch to apply.

        Returns:
            The passing ValidationResult.

        Raises:
            PatchRejectedError: If validation fails. No file is changed.
        """
        result = self._validator.validate(patch)
        if not result.valid:
            raise PatchRejectedError(result)

        staged = dict(self._files)
        for op in patch.files:
            if op.action == FileAction.DELETE:
                staged.pop(op.path, None)
            else:
                staged[op.path] = op.content or ""

        self._files = staged
        logger.info("Applied patch with %d file change(s)", len(patch.files))
        return result
