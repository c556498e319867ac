from __future__ import annotations

import locale
from pathlib import Path
from unittest.mock import patch

import pytest

import file_agent.config as cfg
from file_agent.config import Settings, get_base_dir, get_encoding


@pytest.fixture(autouse=True)
def _reset_cache():
    """Reset the module-level base dir cache before each test."""
    cfg._base_dir_cache = None
    yield
    cfg._base_dir_cache = None


def test_settings_defaults():
    s = Settings(_env_file=None)
    assert s.base_dir is None
    assert s.encoding is None
    assert s.port == 8000
    assert s.log_level == "INFO"


def test_settings_from_env(tmp_path: Path):
    env = {"FILE_AGENT_BASE_DIR": str(tmp_path), "FILE_AGENT_PORT": "9001"}
    with patch.dict("os.environ", env):
        s = Settings(_env_file=None)
    assert s.base_dir == tmp_path
    assert s.port == 9001


def test_base_dir_defaults_to_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cfg.settings, "base_dir", None)
    assert get_base_dir() == tmp_path.resolve()


def test_base_dir_is_resolved_once(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(cfg.settings, "base_dir", tmp_path / "a" / "..")
    first = get_base_dir()
    assert first == tmp_path.resolve()

    monkeypatch.setattr(cfg.settings, "base_dir", tmp_path / "other")
    assert get_base_dir() is first


def test_encoding(monkeypatch):
    monkeypatch.setattr(cfg.settings, "encoding", None)
    assert get_encoding() == locale.getpreferredencoding(False)
    monkeypatch.setattr(cfg.settings, "encoding", "latin-1")
    assert get_encoding() == "latin-1"
