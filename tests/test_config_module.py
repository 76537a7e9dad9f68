"""Tests for :mod:`grapheditor.config`."""

from __future__ import annotations

from pathlib import Path

import pytest

from grapheditor import config


PROJECT_ROOT = Path(config.__file__).resolve().parents[1]


def test_get_env_reads_from_project_dotenv(monkeypatch):
    """The helper should pull values from the real project ``.env`` file."""

    config._load_environment.cache_clear()
    monkeypatch.delenv("GRAPH_EDITOR_CANVAS_WIDTH", raising=False)

    # ``GRAPH_EDITOR_CANVAS_WIDTH`` is defined in the repository level ``.env`` file.
    assert config.get_env("GRAPH_EDITOR_CANVAS_WIDTH") == "800"


def test_get_env_prefers_process_environment(monkeypatch):
    """Explicit environment variables should win over the file contents."""

    config._load_environment.cache_clear()
    monkeypatch.setenv("GRAPH_EDITOR_CANVAS_WIDTH", "1024")

    assert config.get_env("GRAPH_EDITOR_CANVAS_WIDTH") == "1024"
    assert config.get_float_env("GRAPH_EDITOR_CANVAS_WIDTH", 0.0) == 1024.0


def test_get_env_can_reload_after_cache_clear(monkeypatch):
    """Clearing the cache allows the loader to pick up updated ``.env`` values."""

    env_file = PROJECT_ROOT / ".env"
    original_contents = env_file.read_text()
    key = "GRAPH_EDITOR_TEST_TEMP"

    try:
        env_file.write_text(f"{original_contents}\n{key}=first\n")
        config._load_environment.cache_clear()
        monkeypatch.delenv(key, raising=False)
        assert config.get_env(key) == "first"

        # Without clearing the cache the file is not read again.
        env_file.write_text(f"{original_contents}\n{key}=second\n")
        monkeypatch.delenv(key, raising=False)
        assert config.get_env(key) is None

        config._load_environment.cache_clear()
        monkeypatch.delenv(key, raising=False)
        assert config.get_env(key) == "second"
    finally:
        env_file.write_text(original_contents)
        monkeypatch.delenv(key, raising=False)
        config._load_environment.cache_clear()


def test_get_env_returns_default_when_missing(monkeypatch):
    config._load_environment.cache_clear()
    monkeypatch.delenv("GRAPH_EDITOR_DOES_NOT_EXIST", raising=False)

    assert config.get_env("GRAPH_EDITOR_DOES_NOT_EXIST", default="fallback") == "fallback"
    assert config.get_float_env("GRAPH_EDITOR_DOES_NOT_EXIST", 2.5) == 2.5
    assert config.get_bool_env("GRAPH_EDITOR_DOES_NOT_EXIST", default=True) is True


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("Yes", True), ("on", True), ("false", False), ("0", False), ("", False)],
)
def test_get_bool_env_parses_flags(monkeypatch, raw, expected):
    monkeypatch.setenv("GRAPH_EDITOR_FLAG", raw)
    assert config.get_bool_env("GRAPH_EDITOR_FLAG") is expected


def test_typed_helpers_reject_garbage(monkeypatch):
    monkeypatch.setenv("GRAPH_EDITOR_FLAG", "maybe")
    monkeypatch.setenv("GRAPH_EDITOR_NUMBER", "wide")

    with pytest.raises(ValueError):
        config.get_bool_env("GRAPH_EDITOR_FLAG")
    with pytest.raises(ValueError):
        config.get_float_env("GRAPH_EDITOR_NUMBER", 1.0)
