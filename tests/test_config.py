"""Tests for config module."""

import importlib
from pathlib import Path

import dotenv
import pytest

import okr_sheets.config as config_mod


@pytest.fixture(autouse=True)
def _restore_config():
    yield
    importlib.reload(config_mod)


def _clear(monkeypatch):
    for var in (
        "OKR_SHEETS_CONFIG_DIR",
        "OKR_SHEETS_CREDENTIALS_FILE",
        "OKR_SHEETS_TOKEN_FILE",
        "OKR_SHEETS_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(dotenv, "load_dotenv", lambda: None)


def test_defaults(monkeypatch):
    _clear(monkeypatch)

    importlib.reload(config_mod)

    assert config_mod.CREDENTIALS_FILE == Path("config") / "credentials.json"
    assert config_mod.TOKEN_FILE == Path("config") / "token.json"
    assert config_mod.LOG_LEVEL == "WARNING"


def test_config_dir_moves_both_files(monkeypatch, tmp_path):
    _clear(monkeypatch)
    monkeypatch.setenv("OKR_SHEETS_CONFIG_DIR", str(tmp_path))

    importlib.reload(config_mod)

    assert config_mod.CREDENTIALS_FILE == tmp_path / "credentials.json"
    assert config_mod.TOKEN_FILE == tmp_path / "token.json"


def test_explicit_file_overrides(monkeypatch, tmp_path):
    _clear(monkeypatch)
    monkeypatch.setenv("OKR_SHEETS_TOKEN_FILE", str(tmp_path / "t.json"))
    monkeypatch.setenv("OKR_SHEETS_LOG_LEVEL", "debug")

    importlib.reload(config_mod)

    assert config_mod.TOKEN_FILE == tmp_path / "t.json"
    assert config_mod.CREDENTIALS_FILE == Path("config") / "credentials.json"
    assert config_mod.LOG_LEVEL == "DEBUG"


def test_unknown_log_level_falls_back(monkeypatch, capsys):
    _clear(monkeypatch)
    monkeypatch.setenv("OKR_SHEETS_LOG_LEVEL", "verbose")

    importlib.reload(config_mod)

    assert config_mod.LOG_LEVEL == "WARNING"
    assert "OKR_SHEETS_LOG_LEVEL" in capsys.readouterr().err
