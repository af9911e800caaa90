"""Tests for configuration loading and logging setup."""

from __future__ import annotations

import logging

import pytest

from revolt_api.config import Config, setup_logging
from revolt_api.constants import API_URL

CONFIG_ENV_VARS = (
    "REVOLT_TOKEN",
    "REVOLT_API_URL",
    "REVOLT_BOT",
    "REVOLT_TIMEOUT",
    "LOG_LEVEL",
    "LOG_FILE",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no config env vars set and no .env file in the working directory."""
    for name in CONFIG_ENV_VARS:
        # setenv first so teardown also undoes values load_dotenv writes directly
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging's changes to the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_load_defaults(clean_env):
    clean_env.setenv("REVOLT_TOKEN", "env-token")

    config = Config.load()

    assert config.token == "env-token"
    assert config.api_url == API_URL
    assert config.bot is True
    assert config.timeout == 30.0
    assert config.log_level == "INFO"
    assert config.log_file is None


def test_load_overrides(clean_env):
    clean_env.setenv("REVOLT_TOKEN", "session")
    clean_env.setenv("REVOLT_API_URL", "https://chat.example.com/api")
    clean_env.setenv("REVOLT_BOT", "false")
    clean_env.setenv("REVOLT_TIMEOUT", "5")
    clean_env.setenv("LOG_LEVEL", "DEBUG")

    config = Config.load()

    assert config.api_url == "https://chat.example.com/api"
    assert config.bot is False
    assert config.timeout == 5.0
    assert config.log_level == "DEBUG"


def test_load_reads_dotenv(clean_env, tmp_path):
    (tmp_path / ".env").write_text("REVOLT_TOKEN=from-dotenv\nREVOLT_BOT=no\n")

    config = Config.load()

    assert config.token == "from-dotenv"
    assert config.bot is False


def test_load_requires_token(clean_env):
    with pytest.raises(ValueError, match="REVOLT_TOKEN"):
        Config.load()


def test_setup_logging_console(restore_root_logger):
    setup_logging("debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_setup_logging_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "revolt.log"

    setup_logging("INFO", log_file=str(log_file))

    assert log_file.parent.is_dir()
    assert len(logging.getLogger().handlers) == 2
