"""Patch generator: asks an LLM for game code changes and gates the result."""

import logging
import os
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from anthropic import Anthropic
import openai

from patch_gate.generation.exceptions import GenerationError
from patch_gate.generation.prompt_builder import build_system_prompt, build_user_prompt
from patch_gate.generation.response_parser import parse_generation_response
from patch_gate.models import FileOperation, GenerationResult, Patch, ProjectFile
from patch_gate.validation import PatchValidator, UnsafeCodeScanner

logger = logging.getLogger(__name__)

# Constants
DEFAULT_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_OPENAI_MODEL = "gpt-4o"
MAX_API_TOKENS = 4000
TEMPERATURE = 0.7
DEMO_CONFIG_PATH = "src/game/config.ts"
SECURITY_REJECTION = "Generated code failed security validation"


class PatchGenerator:
    """Turns a chat prompt into a validated, annotated patch."""

    def __init__(
        self,
        api_key: str | None = None,
        openai_api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        llm_provider: str = "auto",
        validator: PatchValidator | None = None,
        scanner: UnsafeCodeScanner | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            api_key: Anthropic API key. Falls back to ANTHROPIC_API_KEY env var.
            openai_api_key: OpenAI API key. Falls back to OPENAI_API_KEY env var.
            model: Model ID to use for code generation.
            llm_provider: "auto", "anthropic" or "openai".

        Without any key the generator runs in demo mode and never calls
        a provider.

        Raises:
            GenerationError: If the provider is unknown or its key is missing.
        """
        self.model: str = model
        self.api_key: str | None = api_key or os.getenv("ANTHROPIC_API_KEY")
        self.openai_api_key: str | None = openai_api_key or os.getenv("OPENAI_API_KEY")
        self.validator: PatchValidator = validator if validator is not None else PatchValidator()
        self.scanner: UnsafeCodeScanner = scanner if scanner is not None else UnsafeCodeScanner()
        self._anthropic_client: Anthropic | None = None
        self._openai_client: openai.OpenAI | None = None

        if self.api_key:
            self._anthropic_client = Anthropic(api_key=self.api_key)
        if self.openai_api_key:
            self._openai_client = openai.OpenAI(api_key=self.openai_api_key)

        if llm_provider not in {"auto", "anthropic", "openai"}:
            raise GenerationError(f"Unsupported provider: {llm_provider}")
        self.llm_provider: Literal["auto", "anthropic", "openai"] = llm_provider

        if self.llm_provider == "anthropic" and self._anthropic_client is None:
            raise GenerationError("No Anthropic API key found for provider=anthropic.")
        if self.llm_provider == "openai" and self._openai_client is None:
            raise GenerationError("No OpenAI API key found for provider=openai.")

    @property
    def demo_mode(self) -> bool:
        return self._anthropic_client is None and self._openai_client is None

    def _primary_provider(self) -> Literal["anthropic", "openai"]:
        if self.llm_provider == "auto":
            if self._anthropic_client is not None:
                return "anthropic"
            return "openai"
        return self.llm_provider

    def _resolve_model(self, provider: str) -> str:
        if provider == "openai" and self.model.startswith("claude-"):
            return DEFAULT_OPENAI_MODEL
        return self.model

    def generate(
        self,
        prompt: str,
        files: Mapping[str, str] | Iterable[ProjectFile],
    ) -> GenerationResult:
        """Generate a patch for the prompt against the project's files.

        Flow:
        1. Build system and user prompts (file previews truncated)
        2. Call the provider, or answer from demo mode
        3. Parse the completion best-effort into explanation + patch
        4. Validate the patch; a failing patch is dropped and its errors returned
        5. Scan the accepted patch for advisory warnings

        Args:
            prompt: The user's chat request.
            files: Current project files (path -> content or ProjectFile items).

        Returns:
            GenerationResult. A rejected patch comes back empty with
            error and validation_errors set.

        Raises:
            GenerationError: If the prompt is empty or the provider fails.
        """
        if not prompt or not prompt.strip():
            raise GenerationError("Prompt must not be empty")

        file_map = _as_file_map(files)

        if self.demo_mode:
            logger.info("No API key - using demo mode")
            return self._demo_result(prompt, file_map)

        system_prompt = build_system_prompt(file_map)
        user_prompt = build_user_prompt(prompt)
        text = self._complete(system_prompt, user_prompt)

        explanation, raw_patch = parse_generation_response(text)
        result = self._gate(explanation or "Here are the changes:", raw_patch)
        logger.info("Generated %d file change(s)", len(result.patch.files))
        return result

    def _complete(self, system_prompt: str, user_prompt: str) -> str:
        provider = self._primary_provider()
        try:
            if provider == "anthropic":
                response = self._anthropic_client.messages.create(
                    model=self._resolve_model("anthropic"),
                    max_tokens=MAX_API_TOKENS,
                    temperature=TEMPERATURE,
                    system=system_prompt,
                    messages=[{"role": "user", "content": user_prompt}],
                )
                text = "".join(
                    getattr(block, "text", "") for block in (response.content or [])
                )
            else:
                response = self._openai_client.chat.completions.create(
                    model=self._resolve_model("openai"),
                    max_tokens=MAX_API_TOKENS,
                    temperature=TEMPERATURE,
                    messages=[
                        {"role": "system", "content": system_prompt},
                        {"role": "user", "content": user_prompt},
                    ],
                )
                text = response.choices[0].message.content if response.choices else None
        except Exception as exc:
            logger.error("%s API error: %s", provider, exc)
            raise GenerationError(f"Failed to generate code: {exc}") from exc

        if not text:
            raise GenerationError("No response from AI")
        return text

    def _gate(self, explanation: str, raw_patch: dict[str, Any]) -> GenerationResult:
        if not raw_patch.get("files"):
            return GenerationResult(explanation=explanation)

        validation = self.validator.validate(raw_patch)
        if not validation.valid:
            logger.warning("Patch validation failed: %s", validation.errors)
            return GenerationResult(
                explanation=explanation,
                error=SECURITY_REJECTION,
                validation_errors=validation.errors,
            )

        patch = _to_patch(raw_patch)
        return GenerationResult(
            explanation=explanation,
            patch=patch,
            warnings=self.scanner.scan_patch(patch),
        )

    def _demo_result(self, prompt: str, file_map: dict[str, str]) -> GenerationResult:
        content = file_map.get(DEMO_CONFIG_PATH) or (
            f"// {prompt}\n// Demo mode - add your game config here\nexport const gameConfig = {{}};\n"
        )
        explanation = (
            f'I\'ll help you with "{prompt}". Since we\'re in demo mode, '
            "here's a sample change that adds a comment to the config file."
        )
        result = self._gate(
            explanation,
            {"files": [{"path": DEMO_CONFIG_PATH, "action": "update", "content": content}]},
        )
        result.demo = True
        return result


def _as_file_map(files: Mapping[str, str] | Iterable[ProjectFile]) -> dict[str, str]:
    if isinstance(files, Mapping):
        return dict(files)
    return {f.path: f.content for f in files}


def _to_patch(raw_patch: dict[str, Any]) -> Patch:
    """Build a typed Patch from a raw mapping that already passed validation."""
    operations = []
    for entry in raw_patch["files"]:
        content = entry.get("content")
        operations.append(
            FileOperation(
                path=entry["path"],
                action=entry["action"],
                content=content if isinstance(content, str) else None,
            )
        )
    return Patch(files=operations)
