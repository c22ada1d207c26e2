"""Session state snapshot published by the session controller."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .vocab_item import StudyCard


class Phase(Enum):
    """Answer phase of the current card."""

    FEEDBACK = "feedback"
    COUNTDOWN = "countdown"
    PAUSED = "paused"


@dataclass(frozen=True)
class SessionState:
    """Read-only view of the live session.

    `current_card` is None when the working set is empty. While
    `round_boundary_hit` is set, `position` already points at the next
    card but `current_card` still shows the last answered one.
    """

    position: int
    current_card: Optional[StudyCard]
    answer_revealed: bool
    phase: Phase
    round_boundary_hit: bool
    countdown: Optional[int]
    total: int

    @property
    def is_empty(self) -> bool:
        return self.current_card is None


EMPTY_STATE = SessionState(
    position=0,
    current_card=None,
    answer_revealed=False,
    phase=Phase.FEEDBACK,
    round_boundary_hit=False,
    countdown=None,
    total=0,
)
