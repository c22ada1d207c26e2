"""Settings Manager - Handles environment configuration from .env."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class SettingsManager:
    """
    Resolves paths and process-level options.

    Reads a .env file in the project root. Recognised variables:
        KOTOBA_QUIZ_DATA_DIR   directory holding manifest.json and word lists
        KOTOBA_QUIZ_HOME       directory for settings.json and scores.db
        KOTOBA_QUIZ_LOG_LEVEL  logging level name
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def data_dir(self) -> Path:
        """Directory with the word lists, defaulting to the bundled data."""
        value = _env_value("KOTOBA_QUIZ_DATA_DIR")
        return Path(value).expanduser() if value else PACKAGE_DATA_DIR

    def user_dir(self) -> Path:
        """Directory for per-user state."""
        value = _env_value("KOTOBA_QUIZ_HOME")
        return Path(value).expanduser() if value else Path.home() / ".kotoba_quiz"

    def settings_path(self) -> Path:
        return self.user_dir() / "settings.json"

    def scores_path(self) -> Path:
        return self.user_dir() / "scores.db"

    def log_level(self) -> int:
        """Logging level from the environment, INFO when unset or unknown."""
        name = (_env_value("KOTOBA_QUIZ_LOG_LEVEL") or "INFO").upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)


def _env_value(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value.strip() if value and value.strip() else None
