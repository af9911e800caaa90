"""Configuration management for the Revolt API client."""

from __future__ import annotations

import logging
import logging.handlers
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from revolt_api.constants import API_URL, REQUEST_TIMEOUT

_TRUE_VALUES = ("1", "true", "yes", "on")


def _load_dotenv() -> None:
    """Load .env file from the working directory, if present."""
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def _collect_env_vars() -> dict:
    """Read all config environment variables and return as constructor kwargs."""
    token = os.getenv("REVOLT_TOKEN")
    if not token:
        raise ValueError("REVOLT_TOKEN is required. Set it in the environment or in .env")
    return {
        "token": token,
        "api_url": os.getenv("REVOLT_API_URL", API_URL),
        "bot": _parse_bool(os.getenv("REVOLT_BOT", "true")),
        "timeout": float(os.getenv("REVOLT_TIMEOUT", str(REQUEST_TIMEOUT))),
        "log_level": os.getenv("LOG_LEVEL", "INFO"),
        "log_file": os.getenv("LOG_FILE"),
    }


@dataclass
class Config:
    """Client configuration loaded from .env file."""

    # Bot token or user session token
    token: str

    # Base URL, overridable for self-hosted instances
    api_url: str = API_URL

    # True sends the token as a bot token, False as a user session token
    bot: bool = True

    # Transport timeout (seconds)
    timeout: float = REQUEST_TIMEOUT

    # Logging configuration
    log_level: str = "INFO"
    log_file: str | None = None

    @classmethod
    def load(cls) -> Config:
        """Load configuration from .env file and environment."""
        _load_dotenv()
        return cls(**_collect_env_vars())


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# httpx logs every request at INFO and httpcore traces connections at DEBUG
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    log_level: str,
    log_file: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """
    Route client logs to stderr and, optionally, a rotating file.

    Replaces any handlers already on the root logger. Request logs from the
    HTTP transport are kept at WARNING so ``revolt_api`` debug output is not
    drowned out.

    Args:
        log_level: Level name for the root logger, case-insensitive
        log_file: File to also write to; parent directories are created
        max_bytes: Size at which the log file is rotated
        backup_count: Rotated files to keep
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file, maxBytes=max_bytes, backupCount=backup_count
            )
        )

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())

    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if log_file:
        logging.getLogger(__name__).info("Writing logs to %s", log_file)
