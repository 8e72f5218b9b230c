"""Tests for settings resolution."""

import logging
from pathlib import Path

from saldo import config
from saldo.config import Settings


def test_explicit_arguments_win(tmp_path):
    settings = Settings.load(
        database_path=str(tmp_path / "a.db"),
        session_path=str(tmp_path / "s.json"),
        log_level="debug",
        environ={config.DB_PATH_ENV: "/ignored.db"},
    )

    assert settings.database_path == tmp_path / "a.db"
    assert settings.session_path == tmp_path / "s.json"
    assert settings.log_level == "DEBUG"


def test_environment_variables(tmp_path):
    environ = {
        config.DB_PATH_ENV: str(tmp_path / "env.db"),
        config.SESSION_PATH_ENV: str(tmp_path / "env.json"),
        config.LOG_LEVEL_ENV: "info",
    }

    settings = Settings.load(environ=environ)

    assert settings.database_path == Path(environ[config.DB_PATH_ENV])
    assert settings.session_path == Path(environ[config.SESSION_PATH_ENV])
    assert settings.log_level == "INFO"


def test_defaults_live_in_home_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    settings = Settings.load(environ={})

    assert settings.database_path == tmp_path / ".saldo" / "saldo.db"
    assert settings.session_path == tmp_path / ".saldo" / "session.json"
    assert settings.log_level == config.DEFAULT_LOG_LEVEL
    assert (tmp_path / ".saldo").is_dir()


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    config.configure_logging("debug")

    assert calls[0]["level"] == logging.DEBUG
    assert calls[0]["format"] == config.LOG_FORMAT
