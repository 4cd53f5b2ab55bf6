"""Models for AI-proposed patches and their validation verdicts."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FileAction(str, Enum):
    """Operation a patch entry performs on a project file."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class FileOperation(BaseModel):
    """One entry in a patch."""

    model_config = ConfigDict(frozen=False)

    path: str  # Repository-relative, e.g. "src/game/config.ts"
    action: FileAction
    content: str | None = None  # Required for create/update, ignored for delete


class Patch(BaseModel):
    """An ordered batch of file operations proposed by the model."""

    model_config = ConfigDict(frozen=False)

    files: list[FileOperation] = Field(default_factory=list)


class PatchViolation(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str  # Empty for patch-level errors
    error: str


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=False)

    valid: bool  # True iff errors is empty
    errors: list[PatchViolation] = Field(default_factory=list)
