import json
from unittest.mock import MagicMock

import pytest

from patch_gate.models import Patch


@pytest.fixture
def valid_patch_dict():
    """Raw patch as parsed from model JSON: one create, one update, one delete."""
    return {
        "files": [
            {"path": "src/game/config.ts", "action": "create", "content": "export const x = 1;"},
            {"path": "src/game/scene.ts", "action": "update", "content": "import x from './config';"},
            {"path": "src/game/old.ts", "action": "delete"},
        ]
    }


@pytest.fixture
def valid_patch(valid_patch_dict):
    return Patch.model_validate(valid_patch_dict)


@pytest.fixture
def project_files():
    return {
        "src/game/config.ts": "export const gameConfig = { width: 800 };\n",
        "src/game/old.ts": "export const legacy = true;\n",
        "src/main.ts": "import { gameConfig } from './game/config';\n",
    }


def _completion_json(files, explanation="Added a player sprite"):
    return json.dumps({"explanation": explanation, "patch": {"files": files}})


@pytest.fixture
def completion_json():
    return _completion_json


@pytest.fixture
def mock_anthropic_response():
    """Build a fake Anthropic messages.create() response with the given text."""
    def _make(text):
        block = MagicMock()
        block.text = text
        response = MagicMock()
        response.content = [block]
        return response

    return _make


@pytest.fixture
def mock_openai_response():
    """Build a fake OpenAI chat.completions.create() response with the given text."""
    def _make(text):
        choice = MagicMock()
        choice.message.content = text
        response = MagicMock()
        response.choices = [choice]
        return response

    return _make
