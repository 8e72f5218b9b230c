"""Runtime configuration for saldo.

Values come from explicit arguments first, then environment variables, then
defaults under ``~/.saldo``.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DB_PATH_ENV = "SALDO_DB_PATH"
SESSION_PATH_ENV = "SALDO_SESSION_PATH"
LOG_LEVEL_ENV = "SALDO_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_data_dir() -> Path:
    """Return ``~/.saldo``, creating it if needed."""
    data_dir = Path.home() / ".saldo"
    data_dir.mkdir(exist_ok=True)
    return data_dir


@dataclass(frozen=True)
class Settings:
    """Resolved settings."""

    database_path: Path
    session_path: Path
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load(
        cls,
        database_path: Optional[str] = None,
        session_path: Optional[str] = None,
        log_level: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """Resolve settings from arguments, environment and defaults."""
        if environ is None:
            environ = os.environ

        database_path = database_path or environ.get(DB_PATH_ENV)
        session_path = session_path or environ.get(SESSION_PATH_ENV)
        log_level = (log_level or environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()

        if database_path is None:
            database_path = str(default_data_dir() / "saldo.db")
        if session_path is None:
            session_path = str(default_data_dir() / "session.json")

        return cls(
            database_path=Path(database_path),
            session_path=Path(session_path),
            log_level=log_level,
        )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging for the CLI."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
