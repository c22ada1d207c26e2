"""Session Controller - position, answer phase and round state of a quiz session."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot

from kotoba_quiz.core import (
    IndexOutOfRange,
    Phase,
    SessionConfig,
    SessionState,
    StudyCard,
    WorkingSet,
)
from kotoba_quiz.services import ProficiencyLedger, WordStore

from .advance_timer import AdvanceTimer

logger = logging.getLogger(__name__)


class SessionController(QObject):
    """
    Central state machine of a study session.

    Owns the working set, the position within it, the answer phase of the
    current card and the single advance timer. Every operation that moves
    away from the current card or out of the countdown cancels the timer
    before doing anything else.

    Signals:
        state_changed: SessionState after any transition.
        countdown_changed: Remaining seconds, or None when the countdown ends.
        round_finished: The question limit was reached; waits for
            continue_round() or reshuffle_round().
        working_set_changed: A new WorkingSet was started or reshuffled.
        score_changed: (card identity, new score) after feedback.
    """

    state_changed = Signal(object)  # SessionState
    countdown_changed = Signal(object)  # int | None
    round_finished = Signal()
    working_set_changed = Signal(object)  # WorkingSet
    score_changed = Signal(str, int)

    def __init__(
        self,
        word_store: WordStore,
        ledger: ProficiencyLedger,
        advance_timer: AdvanceTimer,
    ):
        super().__init__()

        if word_store is None:
            raise ValueError("WordStore must not be None")
        if ledger is None:
            raise ValueError("ProficiencyLedger must not be None")
        if advance_timer is None:
            raise ValueError("AdvanceTimer must not be None")

        self.word_store = word_store
        self.ledger = ledger
        self.advance_timer = advance_timer

        self._working_set: Optional[WorkingSet] = None
        self._config = SessionConfig()
        self._position = 0
        self._current_card: Optional[StudyCard] = None
        self._answer_revealed = False
        self._phase = Phase.FEEDBACK
        self._round_boundary_hit = False

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return SessionState(
            position=self._position,
            current_card=self._current_card,
            answer_revealed=self._answer_revealed,
            phase=self._phase,
            round_boundary_hit=self._round_boundary_hit,
            countdown=self.advance_timer.remaining,
            total=len(self._working_set) if self._working_set is not None else 0,
        )

    @property
    def working_set(self) -> Optional[WorkingSet]:
        return self._working_set

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def is_active(self) -> bool:
        return self._working_set is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, working_set: WorkingSet, config: SessionConfig) -> None:
        """Begin a session on the first card of working_set."""
        self.advance_timer.cancel()
        self._working_set = working_set
        self._config = config
        self._position = 0
        self._round_boundary_hit = False
        self._show_position()

        logger.info(
            "Session started: %d cards, mode=%s, limit=%s",
            len(working_set),
            working_set.mode.value,
            "unlimited" if config.is_unlimited else config.question_limit,
        )
        self.working_set_changed.emit(working_set)
        self._notify()

    def reset(self) -> None:
        """Tear the session down, e.g. when returning to setup."""
        self.advance_timer.cancel()
        self._working_set = None
        self._position = 0
        self._current_card = None
        self._answer_revealed = False
        self._phase = Phase.FEEDBACK
        self._round_boundary_hit = False
        self._notify()

    # ------------------------------------------------------------------
    # Answer phase
    # ------------------------------------------------------------------

    @Slot()
    def reveal(self) -> bool:
        """Show the answer of the current card. Returns False when nothing changed."""
        if self._current_card is None or self._phase is not Phase.FEEDBACK:
            return False
        if self._round_boundary_hit:
            return False
        if self._answer_revealed:
            return False
        self._answer_revealed = True
        self._notify()
        return True

    def record_feedback(self, correct: bool) -> Optional[int]:
        """Judge the current card and start the auto-advance cycle.

        Only accepted in practice modes, after the answer is revealed and
        before any earlier feedback on the same card. Ignored while the
        round is waiting for continue_round() or reshuffle_round().

        Returns:
            The card's new score, or None if the feedback was ignored.
        """
        card = self._current_card
        if card is None or not self._working_set.mode.is_practice:
            return None
        if not self._answer_revealed or self._phase is not Phase.FEEDBACK:
            return None
        if self._round_boundary_hit:
            return None

        score = self.ledger.record_feedback(card.identity, correct)
        self.score_changed.emit(card.identity, score)

        if self._config.auto_advance_enabled:
            self._phase = Phase.COUNTDOWN
            self.advance_timer.start(
                self._config.auto_advance_delay_seconds,
                on_tick=self._on_countdown_tick,
                on_expire=self._on_countdown_expired,
            )
        else:
            self._phase = Phase.PAUSED

        self._notify()
        return score

    @Slot()
    def stop_countdown(self) -> bool:
        """Cancel a running countdown and wait for a manual advance."""
        if self._phase is not Phase.COUNTDOWN:
            return False
        self.advance_timer.cancel()
        self._phase = Phase.PAUSED
        self.countdown_changed.emit(None)
        self._notify()
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @Slot()
    def advance_next(self) -> None:
        """Move to the next card.

        In practice modes with a question limit, stops at the limit (once per
        pass, and only when the set is larger than the limit) and waits for
        continue_round() or reshuffle_round(). Past the last card the set
        wraps: practice modes get a fresh shuffle, dictionary mode restarts
        in source order.
        """
        if not self._has_cards() or self._round_boundary_hit:
            return
        self.advance_timer.cancel()

        working_set = self._working_set
        next_position = self._position + 1
        limit = self._config.question_limit

        if (
            working_set.mode.is_practice
            and not self._config.is_unlimited
            and next_position == limit
            and len(working_set) > limit
        ):
            self._position = next_position
            self._round_boundary_hit = True
            if self._phase is Phase.COUNTDOWN:
                self._phase = Phase.PAUSED
                self.countdown_changed.emit(None)
            logger.info("Round finished after %d questions", limit)
            self.round_finished.emit()
            self._notify()
            return

        if next_position >= len(working_set):
            if working_set.mode.is_practice:
                self._working_set = self.word_store.reshuffle(working_set)
                logger.info("End of working set reached, reshuffled %d cards", len(working_set))
                self.working_set_changed.emit(self._working_set)
            self._position = 0
        else:
            self._position = next_position

        self._show_position()
        self._notify()

    @Slot()
    def advance_previous(self) -> None:
        """Move to the previous card, wrapping from the first to the last."""
        if not self._has_cards():
            return
        self.advance_timer.cancel()
        self._position = (self._position - 1) % len(self._working_set)
        self._round_boundary_hit = False
        self._show_position()
        self._notify()

    @Slot(int)
    def jump_to(self, index: int) -> None:
        """Show the card at an absolute position.

        Raises:
            IndexOutOfRange: If index is not a valid position.
        """
        size = len(self._working_set) if self._working_set is not None else 0
        if not (0 <= index < size):
            raise IndexOutOfRange(f"Position {index} out of range for working set of {size} cards")
        self.advance_timer.cancel()
        self._position = index
        self._round_boundary_hit = False
        self._show_position()
        self._notify()

    # ------------------------------------------------------------------
    # End of round
    # ------------------------------------------------------------------

    @Slot()
    def continue_round(self) -> bool:
        """Resume exactly where the round stopped."""
        if not self._round_boundary_hit:
            return False
        self.advance_timer.cancel()
        self._round_boundary_hit = False
        self._show_position()
        self._notify()
        return True

    @Slot()
    def reshuffle_round(self) -> bool:
        """Start over on a freshly shuffled working set."""
        if not self._round_boundary_hit:
            return False
        self.advance_timer.cancel()
        self._working_set = self.word_store.reshuffle(self._working_set)
        self._position = 0
        self._round_boundary_hit = False
        self._show_position()
        self.working_set_changed.emit(self._working_set)
        self._notify()
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _has_cards(self) -> bool:
        return self._working_set is not None and not self._working_set.is_empty

    def _show_position(self) -> None:
        """Make the card at the current position current, with its answer hidden."""
        if self._has_cards():
            self._current_card = self._working_set[self._position]
        else:
            self._current_card = None
        self._answer_revealed = False
        self._phase = Phase.FEEDBACK

    def _on_countdown_tick(self, remaining: int) -> None:
        self.countdown_changed.emit(remaining)

    def _on_countdown_expired(self) -> None:
        self.countdown_changed.emit(None)
        self.advance_next()

    def _notify(self) -> None:
        self.state_changed.emit(self.state)
