"""Domain layer - Pure entities describing vocabulary and session state."""

from .category_manifest import CategoryInfo, CategoryManifest, ManifestGroup, ManifestSubgroup
from .display_mode import DisplayMode
from .errors import DataUnavailable, FetchError, IndexOutOfRange, ParseError
from .session_config import MAX_DELAY_SECONDS, MAX_QUESTION_LIMIT, UNLIMITED, SessionConfig
from .session_state import Phase, SessionState
from .vocab_item import StudyCard, VocabItem
from .working_set import WorkingSet

__all__ = [
    "CategoryInfo",
    "CategoryManifest",
    "ManifestGroup",
    "ManifestSubgroup",
    "DisplayMode",
    "DataUnavailable",
    "FetchError",
    "ParseError",
    "IndexOutOfRange",
    "SessionConfig",
    "UNLIMITED",
    "MAX_QUESTION_LIMIT",
    "MAX_DELAY_SECONDS",
    "Phase",
    "SessionState",
    "StudyCard",
    "VocabItem",
    "WorkingSet",
]
