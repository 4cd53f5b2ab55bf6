"""Report models for patch review and code generation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from patch_gate.models.patch_models import FileAction, Patch, PatchViolation


class UnsafeCodeWarning(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    rule_id: str      # UnsafeCodeRule that matched, e.g. "eval-call"
    message: str      # Human-readable advisory text


class PatchPreviewEntry(BaseModel):
    model_config = ConfigDict(frozen=False)

    path: str
    action: FileAction
    diff: str  # Unified diff against current content, empty if unchanged


class ProjectFile(BaseModel):
    """A file currently stored in a project."""

    model_config = ConfigDict(frozen=False)

    path: str
    content: str


class GenerationResult(BaseModel):
    model_config = ConfigDict(frozen=False)

    explanation: str
    patch: Patch = Field(default_factory=Patch)
    warnings: list[UnsafeCodeWarning] = Field(default_factory=list)
    validation_errors: list[PatchViolation] = Field(default_factory=list)
    error: str | None = None          # Set when the generated patch was dropped
    demo: bool = False                # True when no provider key was configured
    generated_at: datetime = Field(default_factory=datetime.now)
