from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from infix_tree import config

_real_load_env = config.load_env


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "load_env", lambda: None)


def test_default_log_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("INFIX_TREE_LOG_LEVEL", raising=False)
    settings = config.load_settings()
    assert settings.log_level == "WARNING"
    assert settings.log_level_number == logging.WARNING


def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("INFIX_TREE_LOG_LEVEL", " debug ")
    settings = config.load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_level_number == logging.DEBUG


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("INFIX_TREE_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        config.load_settings()


def test_load_env_prefers_project_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / ".env").write_text("INFIX_TREE_LOG_LEVEL=ERROR\n", encoding="utf-8")
    # setenv + delenv so teardown removes whatever load_dotenv writes.
    monkeypatch.setenv("INFIX_TREE_LOG_LEVEL", "unset")
    monkeypatch.delenv("INFIX_TREE_LOG_LEVEL")
    monkeypatch.setattr(config, "repo_root", lambda: tmp_path)

    _real_load_env()
    assert os.environ["INFIX_TREE_LOG_LEVEL"] == "ERROR"
