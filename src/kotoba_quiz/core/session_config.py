"""Session configuration entity."""

from dataclasses import dataclass, replace
from typing import Optional

# Sentinel question limit: the end-of-round gate never binds.
UNLIMITED = 0

MIN_QUESTION_LIMIT = 1
MAX_QUESTION_LIMIT = 1000
MIN_DELAY_SECONDS = 1
MAX_DELAY_SECONDS = 20


@dataclass(frozen=True)
class SessionConfig:
    """Settings a session is started with. Immutable for the session's lifetime.

    Attributes:
        question_limit: Questions per round (1..1000), or UNLIMITED.
        auto_advance_enabled: Whether feedback starts a countdown to the next card.
        auto_advance_delay_seconds: Countdown length (1..20).
        voice_preference: Identifier of the preferred speech voice, if any.

    Raises:
        ValueError: If a numeric field is out of range.
    """

    question_limit: int = 10
    auto_advance_enabled: bool = True
    auto_advance_delay_seconds: int = 3
    voice_preference: Optional[str] = None

    def __post_init__(self):
        if self.question_limit != UNLIMITED and not (
            MIN_QUESTION_LIMIT <= self.question_limit <= MAX_QUESTION_LIMIT
        ):
            raise ValueError(
                f"question_limit must be between {MIN_QUESTION_LIMIT} and "
                f"{MAX_QUESTION_LIMIT} or UNLIMITED, got {self.question_limit}"
            )
        if not (MIN_DELAY_SECONDS <= self.auto_advance_delay_seconds <= MAX_DELAY_SECONDS):
            raise ValueError(
                f"auto_advance_delay_seconds must be between {MIN_DELAY_SECONDS} and "
                f"{MAX_DELAY_SECONDS}, got {self.auto_advance_delay_seconds}"
            )

    @property
    def is_unlimited(self) -> bool:
        return self.question_limit == UNLIMITED

    def with_changes(self, **changes) -> "SessionConfig":
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "question_limit": self.question_limit,
            "auto_advance_enabled": self.auto_advance_enabled,
            "auto_advance_delay_seconds": self.auto_advance_delay_seconds,
            "voice_preference": self.voice_preference,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SessionConfig":
        """Build a config from stored values, falling back to defaults for missing keys.

        Raises:
            ValueError: If a stored value is out of range or of the wrong type.
        """
        defaults = cls()
        try:
            return cls(
                question_limit=int(data.get("question_limit", defaults.question_limit)),
                auto_advance_enabled=bool(
                    data.get("auto_advance_enabled", defaults.auto_advance_enabled)
                ),
                auto_advance_delay_seconds=int(
                    data.get("auto_advance_delay_seconds", defaults.auto_advance_delay_seconds)
                ),
                voice_preference=data.get("voice_preference") or None,
            )
        except (TypeError, AttributeError) as e:
            raise ValueError(f"Invalid settings record: {e}") from e
