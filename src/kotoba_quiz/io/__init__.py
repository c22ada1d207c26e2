"""I/O layer - Data access for word lists, scores and settings."""

from .category_source import CategorySource
from .score_repository import ScoreRepository
from .settings_store import SettingsStore

__all__ = ["CategorySource", "ScoreRepository", "SettingsStore"]
