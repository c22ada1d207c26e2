"""Settings Context - the session configuration currently in effect."""

import logging
from typing import Optional

from kotoba_quiz.core import SessionConfig
from kotoba_quiz.io import SettingsStore

logger = logging.getLogger(__name__)


class SettingsContext:
    """Holds the editable SessionConfig.

    Sessions receive an immutable snapshot when they start, so edits made
    while a session runs only apply to the next one.
    """

    def __init__(self, store: SettingsStore, defaults: Optional[SessionConfig] = None):
        if store is None:
            raise ValueError("SettingsStore must not be None")
        self._store = store
        self._config = store.load_settings() or defaults or SessionConfig()

    def session_config(self) -> SessionConfig:
        return self._config

    def update(self, config: SessionConfig) -> SessionConfig:
        """Replace and persist the config.

        Raises:
            RuntimeError: If the settings cannot be saved.
        """
        self._store.save_settings(config)
        self._config = config
        logger.info("Settings updated: %s", config)
        return config
