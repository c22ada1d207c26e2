"""File-based persistence of the session settings record."""

import json
import logging
from pathlib import Path
from typing import Optional

from kotoba_quiz.core import SessionConfig

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Stores the SessionConfig as a small JSON document.

    Format:
    {
        "version": 1,
        "settings": {
            "question_limit": 10,
            "auto_advance_enabled": true,
            "auto_advance_delay_seconds": 3,
            "voice_preference": null
        }
    }
    """

    SETTINGS_VERSION = 1

    def __init__(self, path: Path):
        self.path = Path(path)

    def load_settings(self) -> Optional[SessionConfig]:
        """Return the stored config, or None when nothing usable is stored."""
        if not self.path.exists():
            return None

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return SessionConfig.from_dict(data.get("settings", {}))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError, ValueError, AttributeError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return None

    def save_settings(self, config: SessionConfig) -> None:
        """Write the config to disk.

        Raises:
            RuntimeError: If the file cannot be written.
        """
        data = {"version": self.SETTINGS_VERSION, "settings": config.to_dict()}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise RuntimeError(f"Failed to save settings to {self.path}: {e}") from e
