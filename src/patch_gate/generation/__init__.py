"""Chat-driven patch generation."""

from patch_gate.generation.exceptions import GenerationError
from patch_gate.generation.patch_generator import PatchGenerator
from patch_gate.generation.prompt_builder import (
    MAX_FILE_PREVIEW,
    build_file_preview,
    build_system_prompt,
    build_user_prompt,
)
from patch_gate.generation.response_parser import parse_generation_response

__all__ = [
    "MAX_FILE_PREVIEW",
    "GenerationError",
    "PatchGenerator",
    "build_file_preview",
    "build_system_prompt",
    "build_user_prompt",
    "parse_generation_response",
]
