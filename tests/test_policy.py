"""Tests for PatchPolicy configuration."""

import pytest

from patch_gate.validation import PatchPolicy, PolicyConfigError
from patch_gate.validation.policy import (
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_MAX_FILES_PER_PATCH,
    DEFAULT_MAX_PATH_LENGTH,
    ENV_MAX_FILE_SIZE,
    ENV_MAX_FILES,
    ENV_MAX_PATH_LENGTH,
)


@pytest.fixture(autouse=True)
def clear_policy_env(monkeypatch):
    for name in (ENV_MAX_FILES, ENV_MAX_FILE_SIZE, ENV_MAX_PATH_LENGTH):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    policy = PatchPolicy()
    assert policy.max_files_per_patch == DEFAULT_MAX_FILES_PER_PATCH == 50
    assert policy.max_file_size == DEFAULT_MAX_FILE_SIZE == 100 * 1024
    assert policy.max_path_length == DEFAULT_MAX_PATH_LENGTH == 256


def test_from_env_without_variables_uses_defaults():
    assert PatchPolicy.from_env() == PatchPolicy()


def test_from_env_reads_variables(monkeypatch):
    monkeypatch.setenv(ENV_MAX_FILES, "10")
    monkeypatch.setenv(ENV_MAX_FILE_SIZE, " 2048 ")
    monkeypatch.setenv(ENV_MAX_PATH_LENGTH, "128")
    policy = PatchPolicy.from_env()
    assert policy.max_files_per_patch == 10
    assert policy.max_file_size == 2048
    assert policy.max_path_length == 128


def test_from_env_overrides_win(monkeypatch):
    monkeypatch.setenv(ENV_MAX_FILES, "10")
    policy = PatchPolicy.from_env(max_files_per_patch=3, max_file_size=None)
    assert policy.max_files_per_patch == 3
    assert policy.max_file_size == DEFAULT_MAX_FILE_SIZE


@pytest.mark.parametrize("raw", ["ten", "1.5", "0", "-4"])
def test_from_env_rejects_bad_values(monkeypatch, raw):
    monkeypatch.setenv(ENV_MAX_FILES, raw)
    with pytest.raises(PolicyConfigError, match=ENV_MAX_FILES):
        PatchPolicy.from_env()


def test_from_env_rejects_non_positive_override():
    with pytest.raises(PolicyConfigError):
        PatchPolicy.from_env(max_file_size=0)


def test_policy_is_immutable():
    policy = PatchPolicy()
    with pytest.raises(Exception):
        policy.max_files_per_patch = 1
