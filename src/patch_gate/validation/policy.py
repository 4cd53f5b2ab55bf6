"""Ceilings and rule tables a PatchValidator enforces."""

import os

from pydantic import BaseModel, ConfigDict

from patch_gate.rules import ALLOWED_EXTENSIONS, FORBIDDEN_PATH_RULES, ForbiddenPathRule
from patch_gate.validation.exceptions import PolicyConfigError

# Defaults
DEFAULT_MAX_FILES_PER_PATCH = 50
DEFAULT_MAX_FILE_SIZE = 100 * 1024  # 100KB max per file
DEFAULT_MAX_PATH_LENGTH = 256

# Environment overrides read by PatchPolicy.from_env()
ENV_MAX_FILES = "PATCH_GATE_MAX_FILES"
ENV_MAX_FILE_SIZE = "PATCH_GATE_MAX_FILE_SIZE"
ENV_MAX_PATH_LENGTH = "PATCH_GATE_MAX_PATH_LENGTH"


class PatchPolicy(BaseModel):
    """Immutable configuration owned by a PatchValidator."""

    model_config = ConfigDict(frozen=True)

    max_files_per_patch: int = DEFAULT_MAX_FILES_PER_PATCH
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_path_length: int = DEFAULT_MAX_PATH_LENGTH
    allowed_extensions: tuple[str, ...] = ALLOWED_EXTENSIONS
    forbidden_path_rules: tuple[ForbiddenPathRule, ...] = FORBIDDEN_PATH_RULES

    @classmethod
    def from_env(cls, **overrides) -> "PatchPolicy":
        """Build a policy from PATCH_GATE_* environment variables.

        Unset variables keep their defaults. Explicit keyword overrides
        win over the environment.

        Raises:
            PolicyConfigError: If a variable is not a positive integer.
        """
        values: dict[str, int] = {}
        for env_name, field in (
            (ENV_MAX_FILES, "max_files_per_patch"),
            (ENV_MAX_FILE_SIZE, "max_file_size"),
            (ENV_MAX_PATH_LENGTH, "max_path_length"),
        ):
            raw = os.getenv(env_name)
            if raw is None or raw.strip() == "":
                continue
            values[field] = _parse_positive_int(env_name, raw)

        for field, value in overrides.items():
            if value is None:
                continue
            if value <= 0:
                raise PolicyConfigError(f"{field} must be positive, got {value}")
            values[field] = value
        return cls(**values)


def _parse_positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise PolicyConfigError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise PolicyConfigError(f"{name} must be positive, got {value}")
    return value
