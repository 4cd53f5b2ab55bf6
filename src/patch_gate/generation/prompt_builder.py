"""Prompt construction for the game code generator."""

from collections.abc import Iterable, Mapping

from patch_gate.models import ProjectFile

# Max chars of each project file shown to the model. Unrelated to the
# validator's per-file content ceiling.
MAX_FILE_PREVIEW = 500

SYSTEM_PROMPT_TEMPLATE = """You are an expert game developer assistant. You help users create and modify games.

You are working on a game project. The user will describe what they want, and you should respond with:
1. A brief explanation of what you're going to do
2. A JSON patch object containing the file changes

IMPORTANT RULES:
- Only modify files in the src/game directory
- Keep exports stable (don't rename exported functions/classes)
- Don't break the build
- Use Phaser for 2D games or Three.js for 3D games
- Keep code clean and well-organized

Response format:
{{
  "explanation": "Brief explanation of changes",
  "patch": {{
    "files": [
      {{ "path": "src/game/file.ts", "action": "create|update|delete", "content": "file content" }}
    ]
  }}
}}

Current project files:
{file_previews}"""

USER_PROMPT_TEMPLATE = """User request: {prompt}

Remember to respond with JSON containing "explanation" and "patch" fields."""


def build_file_preview(path: str, content: str) -> str:
    """Render one file as a header line plus its first MAX_FILE_PREVIEW chars."""
    preview = content[:MAX_FILE_PREVIEW]
    if len(content) > MAX_FILE_PREVIEW:
        preview += "..."
    return f"--- {path} ---\n{preview}"


def build_system_prompt(files: Mapping[str, str] | Iterable[ProjectFile]) -> str:
    """Build the system prompt with previews of the current project files."""
    previews = [build_file_preview(path, content) for path, content in _iter_files(files)]
    return SYSTEM_PROMPT_TEMPLATE.format(file_previews="\n\n".join(previews))


def build_user_prompt(prompt: str) -> str:
    return USER_PROMPT_TEMPLATE.format(prompt=prompt)


def _iter_files(files: Mapping[str, str] | Iterable[ProjectFile]) -> list[tuple[str, str]]:
    if isinstance(files, Mapping):
        return list(files.items())
    return [(f.path, f.content) for f in files]
