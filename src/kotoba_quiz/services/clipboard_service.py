"""Clipboard Service - copies card text for sharing."""

import logging

from PySide6.QtGui import QGuiApplication

logger = logging.getLogger(__name__)


class ClipboardService:
    """Copies plain text to the system clipboard."""

    def copy_text(self, text: str) -> bool:
        """Copy text, returning False when there is nothing to copy or no clipboard."""
        if not text:
            return False
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            logger.warning("No clipboard available")
            return False
        clipboard.setText(text)
        logger.debug("Copied %d characters to clipboard", len(text))
        return True
