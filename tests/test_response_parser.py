"""Tests for parse_generation_response."""

from patch_gate.generation import parse_generation_response


def test_parses_plain_json(completion_json):
    files = [{"path": "src/game/a.ts", "action": "create", "content": "x"}]
    explanation, patch = parse_generation_response(completion_json(files))
    assert explanation == "Added a player sprite"
    assert patch == {"files": files}


def test_extracts_json_wrapped_in_prose_and_fences(completion_json):
    files = [{"path": "src/game/a.ts", "action": "delete"}]
    text = "Sure! Here you go:\n```json\n" + completion_json(files) + "\n```\nEnjoy."
    explanation, patch = parse_generation_response(text)
    assert explanation == "Added a player sprite"
    assert patch["files"] == files


def test_no_json_falls_back_to_text():
    text = "I cannot help with that."
    assert parse_generation_response(text) == (text, {"files": []})


def test_invalid_json_falls_back_to_text():
    text = "Here: {not: valid json}"
    assert parse_generation_response(text) == (text, {"files": []})


def test_missing_patch_gives_empty_patch():
    text = '{"explanation": "Just chatting"}'
    assert parse_generation_response(text) == ("Just chatting", {"files": []})


def test_non_string_explanation_uses_raw_text():
    text = '{"explanation": 42, "patch": {"files": []}}'
    explanation, _ = parse_generation_response(text)
    assert explanation == text


def test_malformed_patch_is_passed_through_for_validation():
    """Shape problems inside the patch are the validator's job."""
    text = '{"explanation": "x", "patch": {"files": "not-a-list"}}'
    _, patch = parse_generation_response(text)
    assert patch == {"files": "not-a-list"}
