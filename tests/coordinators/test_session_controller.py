"""Unit tests for the SessionController state machine."""

from unittest.mock import MagicMock

import pytest

from kotoba_quiz.coordinators import AdvanceTimer, SessionController
from kotoba_quiz.core import UNLIMITED, DisplayMode, IndexOutOfRange, Phase, SessionConfig


# ============================================================================
# Helpers
# ============================================================================


def headwords(working_set):
    return [card.item.headword for card in working_set]


def answer(controller, correct=True):
    controller.reveal()
    return controller.record_feedback(correct)


@pytest.fixture
def five_cards(working_set_factory):
    return working_set_factory(["A", "B", "C", "D", "E"])


@pytest.fixture
def manual_config():
    return SessionConfig(question_limit=UNLIMITED, auto_advance_enabled=False)


# ============================================================================
# Construction and start
# ============================================================================


def test_controller_fails_fast_on_none_collaborators(word_store, ledger, fake_scheduler):
    with pytest.raises(ValueError, match="WordStore must not be None"):
        SessionController(word_store=None, ledger=ledger, advance_timer=AdvanceTimer(fake_scheduler))
    with pytest.raises(ValueError, match="ProficiencyLedger must not be None"):
        SessionController(word_store=word_store, ledger=None, advance_timer=AdvanceTimer(fake_scheduler))
    with pytest.raises(ValueError, match="AdvanceTimer must not be None"):
        SessionController(word_store=word_store, ledger=ledger, advance_timer=None)


def test_start_shows_first_card(controller, five_cards, manual_config):
    controller.start(five_cards, manual_config)

    state = controller.state
    assert state.position == 0
    assert state.current_card.item.headword == "A"
    assert state.answer_revealed is False
    assert state.phase is Phase.FEEDBACK
    assert state.round_boundary_hit is False
    assert state.total == 5


def test_start_emits_working_set_and_state(controller, five_cards, manual_config):
    working_sets, states = [], []
    controller.working_set_changed.connect(working_sets.append)
    controller.state_changed.connect(states.append)

    controller.start(five_cards, manual_config)

    assert working_sets == [five_cards]
    assert states[-1].current_card.item.headword == "A"


def test_empty_working_set_has_no_current_card(controller, working_set_factory, manual_config):
    empty = working_set_factory([])
    controller.start(empty, manual_config)

    controller.advance_next()
    controller.advance_previous()

    state = controller.state
    assert state.current_card is None
    assert state.is_empty
    assert state.position == 0
    assert controller.reveal() is False
    assert controller.record_feedback(True) is None


# ============================================================================
# Reveal and feedback
# ============================================================================


def test_reveal_is_idempotent(controller, five_cards, manual_config):
    controller.start(five_cards, manual_config)
    states = []
    controller.state_changed.connect(states.append)

    assert controller.reveal() is True
    assert controller.reveal() is False

    assert controller.state.answer_revealed is True
    assert len(states) == 1


def test_feedback_requires_revealed_answer(controller, five_cards, manual_config, ledger):
    controller.start(five_cards, manual_config)

    assert controller.record_feedback(True) is None
    assert ledger.score_of("test-A") == 0


def test_feedback_sequence_updates_scores(controller, five_cards, manual_config, ledger):
    controller.start(five_cards, manual_config)

    assert answer(controller, correct=False) == 0
    controller.jump_to(0)
    assert answer(controller, correct=True) == 1
    controller.jump_to(0)
    assert answer(controller, correct=True) == 2
    controller.jump_to(0)
    assert answer(controller, correct=False) == 0
    assert ledger.score_of("test-A") == 0


def test_feedback_only_once_per_card(controller, five_cards, manual_config, ledger):
    controller.start(five_cards, manual_config)

    answer(controller, correct=True)
    assert controller.record_feedback(True) is None
    assert ledger.score_of("test-A") == 1


def test_feedback_emits_score_changed(controller, five_cards, manual_config):
    controller.start(five_cards, manual_config)
    scores = []
    controller.score_changed.connect(lambda item_id, score: scores.append((item_id, score)))

    answer(controller, correct=True)

    assert scores == [("test-A", 1)]


def test_feedback_without_auto_advance_pauses(controller, five_cards, manual_config, fake_scheduler):
    controller.start(five_cards, manual_config)

    answer(controller)

    assert controller.state.phase is Phase.PAUSED
    assert fake_scheduler.pending_count == 0
    fake_scheduler.advance(60)
    assert controller.state.position == 0


def test_feedback_ignored_in_dictionary_mode(controller, working_set_factory, manual_config, ledger):
    dictionary = working_set_factory(["A", "B"], mode=DisplayMode.DICTIONARY)
    controller.start(dictionary, manual_config)

    assert controller.reveal() is True
    assert controller.record_feedback(True) is None
    assert ledger.score_of("test-A") == 0


# ============================================================================
# Countdown
# ============================================================================


def test_countdown_ticks_then_advances(controller, five_cards, fake_scheduler):
    config = SessionConfig(question_limit=UNLIMITED, auto_advance_delay_seconds=3)
    controller.start(five_cards, config)
    ticks = []
    controller.countdown_changed.connect(ticks.append)

    answer(controller)
    assert controller.state.phase is Phase.COUNTDOWN
    assert controller.state.countdown == 3

    fake_scheduler.advance(2)
    assert controller.state.countdown == 1
    assert controller.state.position == 0

    fake_scheduler.advance(1)
    assert ticks == [3, 2, 1, None]
    state = controller.state
    assert state.position == 1
    assert state.current_card.item.headword == "B"
    assert state.phase is Phase.FEEDBACK
    assert state.answer_revealed is False
    assert state.countdown is None


def test_stop_countdown_pauses(controller, five_cards, fake_scheduler):
    controller.start(five_cards, SessionConfig(question_limit=UNLIMITED))
    answer(controller)

    assert controller.stop_countdown() is True

    state = controller.state
    assert state.phase is Phase.PAUSED
    assert state.countdown is None
    fake_scheduler.advance(60)
    assert controller.state.position == 0


def test_stop_countdown_outside_countdown_is_noop(controller, five_cards, manual_config):
    controller.start(five_cards, manual_config)

    assert controller.stop_countdown() is False
    assert controller.state.phase is Phase.FEEDBACK


def test_manual_navigation_cancels_stale_countdown(controller, five_cards, fake_scheduler, ledger):
    controller.start(five_cards, SessionConfig(question_limit=UNLIMITED, auto_advance_delay_seconds=2))
    answer(controller)

    controller.advance_previous()
    assert controller.state.position == 4
    assert fake_scheduler.pending_count == 0

    fake_scheduler.advance(30)

    state = controller.state
    assert state.position == 4
    assert state.phase is Phase.FEEDBACK
    assert ledger.score_of("test-A") == 1
    assert ledger.score_of("test-E") == 0


def test_jump_cancels_stale_countdown(controller, five_cards, fake_scheduler):
    controller.start(five_cards, SessionConfig(question_limit=UNLIMITED, auto_advance_delay_seconds=1))
    answer(controller)

    controller.jump_to(3)
    fake_scheduler.advance(10)

    assert controller.state.position == 3
    assert controller.state.current_card.item.headword == "D"


def test_reset_cancels_countdown(controller, five_cards, fake_scheduler):
    controller.start(five_cards, SessionConfig(question_limit=UNLIMITED))
    answer(controller)

    controller.reset()
    fake_scheduler.advance(30)

    assert controller.is_active is False
    assert controller.state.current_card is None
    assert fake_scheduler.pending_count == 0


def test_restart_replaces_previous_countdown(controller, five_cards, working_set_factory, fake_scheduler):
    controller.start(five_cards, SessionConfig(question_limit=UNLIMITED, auto_advance_delay_seconds=1))
    answer(controller)

    other = working_set_factory(["X", "Y"])
    controller.start(other, SessionConfig(question_limit=UNLIMITED, auto_advance_enabled=False))
    fake_scheduler.advance(5)

    assert controller.state.current_card.item.headword == "X"


# ============================================================================
# Round limit
# ============================================================================


@pytest.mark.parametrize("size", [2, 3, 5, 8])
def test_round_boundary_fires_exactly_at_limit(controller, working_set_factory, size):
    words = [f"w{i}" for i in range(size)]
    for limit in range(1, size):
        controller.start(
            working_set_factory(words),
            SessionConfig(question_limit=limit, auto_advance_enabled=False),
        )
        for step in range(1, limit):
            controller.advance_next()
            assert controller.state.round_boundary_hit is False, (size, limit, step)

        controller.advance_next()

        state = controller.state
        assert state.round_boundary_hit is True
        assert state.position == limit


def test_round_boundary_keeps_last_card_and_emits(controller, five_cards):
    controller.start(five_cards, SessionConfig(question_limit=2, auto_advance_enabled=False))
    finished = []
    controller.round_finished.connect(lambda: finished.append(True))

    controller.advance_next()
    controller.advance_next()

    state = controller.state
    assert finished == [True]
    assert state.position == 2
    assert state.current_card.item.headword == "B"


def test_advance_blocked_while_round_boundary_pending(controller, five_cards):
    controller.start(five_cards, SessionConfig(question_limit=2, auto_advance_enabled=False))
    controller.advance_next()
    controller.advance_next()

    controller.advance_next()

    assert controller.state.position == 2
    assert controller.state.current_card.item.headword == "B"


def test_judging_blocked_while_round_boundary_pending(controller, working_set_factory, fake_scheduler, ledger):
    config = SessionConfig(question_limit=2, auto_advance_enabled=True, auto_advance_delay_seconds=1)
    controller.start(working_set_factory(["A", "B", "C"]), config)
    controller.advance_next()
    controller.reveal()
    controller.advance_next()
    assert controller.state.round_boundary_hit is True

    assert controller.reveal() is False
    assert controller.record_feedback(True) is None
    fake_scheduler.advance(5)

    state = controller.state
    assert ledger.score_of("test-B") == 0
    assert state.round_boundary_hit is True
    assert state.phase is Phase.FEEDBACK
    assert state.countdown is None
    assert fake_scheduler.pending_count == 0


@pytest.mark.parametrize("limit", [5, 6, 100, UNLIMITED])
def test_limit_not_below_set_size_never_gates(controller, five_cards, limit):
    controller.start(five_cards, SessionConfig(question_limit=limit, auto_advance_enabled=False))
    finished = []
    controller.round_finished.connect(lambda: finished.append(True))

    for _ in range(12):
        controller.advance_next()

    assert finished == []
    assert controller.state.round_boundary_hit is False


def test_practice_wraparound_reshuffles_same_cards(controller, five_cards, manual_config):
    controller.start(five_cards, manual_config)
    working_sets = []
    controller.working_set_changed.connect(working_sets.append)

    for _ in range(4):
        controller.advance_next()
    assert controller.state.position == 4
    assert working_sets == []

    controller.advance_next()

    reshuffled = controller.working_set
    assert working_sets == [reshuffled]
    assert reshuffled is not five_cards
    assert len(reshuffled) == 5
    assert sorted(headwords(reshuffled)) == ["A", "B", "C", "D", "E"]
    assert controller.state.position == 0
    assert controller.state.current_card == reshuffled[0]


def test_continue_resumes_where_round_stopped(controller, five_cards):
    controller.start(five_cards, SessionConfig(question_limit=3, auto_advance_enabled=False))
    for _ in range(3):
        controller.advance_next()

    assert controller.continue_round() is True

    state = controller.state
    assert state.round_boundary_hit is False
    assert state.position == 3
    assert state.current_card.item.headword == "D"
    assert state.phase is Phase.FEEDBACK

    # Gate fires once per pass
    controller.advance_next()
    assert controller.state.round_boundary_hit is False
    assert controller.state.current_card.item.headword == "E"


def test_reshuffle_round_restarts_at_zero(controller, five_cards):
    controller.start(five_cards, SessionConfig(question_limit=3, auto_advance_enabled=False))
    for _ in range(3):
        controller.advance_next()

    assert controller.reshuffle_round() is True

    state = controller.state
    assert state.round_boundary_hit is False
    assert state.position == 0
    assert state.current_card == controller.working_set[0]
    assert sorted(headwords(controller.working_set)) == ["A", "B", "C", "D", "E"]


def test_round_recovery_without_boundary_is_noop(controller, five_cards, manual_config):
    controller.start(five_cards, manual_config)

    assert controller.continue_round() is False
    assert controller.reshuffle_round() is False
    assert controller.working_set is five_cards


def test_dictionary_mode_ignores_limit_and_keeps_order(controller, working_set_factory):
    dictionary = working_set_factory(["A", "B", "C"], mode=DisplayMode.DICTIONARY)
    controller.start(dictionary, SessionConfig(question_limit=1))

    seen = []
    for _ in range(6):
        controller.advance_next()
        seen.append(controller.state.current_card.item.headword)

    assert seen == ["B", "C", "A", "B", "C", "A"]
    assert controller.working_set is dictionary
    assert controller.state.round_boundary_hit is False


# ============================================================================
# Previous / jump
# ============================================================================


def test_previous_wraps_to_last(controller, five_cards, manual_config):
    controller.start(five_cards, manual_config)

    controller.advance_previous()

    assert controller.state.position == 4
    assert controller.state.current_card.item.headword == "E"


def test_previous_inverts_next(controller, five_cards, manual_config):
    controller.start(five_cards, manual_config)
    controller.advance_next()
    controller.advance_next()
    before = controller.state

    controller.advance_next()
    controller.advance_previous()

    after = controller.state
    assert after.position == before.position
    assert after.current_card == before.current_card


def test_previous_resets_answer_phase(controller, five_cards, manual_config):
    controller.start(five_cards, manual_config)
    answer(controller)

    controller.advance_previous()

    assert controller.state.answer_revealed is False
    assert controller.state.phase is Phase.FEEDBACK


def test_previous_clears_round_boundary(controller, five_cards):
    controller.start(five_cards, SessionConfig(question_limit=2, auto_advance_enabled=False))
    controller.advance_next()
    controller.advance_next()

    controller.advance_previous()

    assert controller.state.round_boundary_hit is False
    assert controller.state.current_card.item.headword == "B"


def test_jump_to_sets_position(controller, five_cards, manual_config):
    controller.start(five_cards, manual_config)
    answer(controller)

    controller.jump_to(2)

    state = controller.state
    assert state.position == 2
    assert state.current_card.item.headword == "C"
    assert state.answer_revealed is False
    assert state.phase is Phase.FEEDBACK


@pytest.mark.parametrize("index", [-1, 5, 99])
def test_jump_to_out_of_range_raises(controller, five_cards, manual_config, index):
    controller.start(five_cards, manual_config)

    with pytest.raises(IndexOutOfRange):
        controller.jump_to(index)
    assert controller.state.position == 0


def test_jump_to_without_session_raises(controller):
    with pytest.raises(IndexOutOfRange):
        controller.jump_to(0)


# ============================================================================
# End-to-end walkthrough
# ============================================================================


def test_three_card_round_with_auto_advance(controller, working_set_factory, fake_scheduler, ledger):
    working_set = working_set_factory(["A", "B", "C"])
    config = SessionConfig(question_limit=2, auto_advance_enabled=True, auto_advance_delay_seconds=1)

    controller.start(working_set, config)
    assert controller.state.current_card.item.headword == "A"

    controller.reveal()
    assert controller.state.answer_revealed is True

    assert controller.record_feedback(True) == 1
    assert ledger.score_of("test-A") == 1
    assert controller.state.phase is Phase.COUNTDOWN
    assert controller.state.countdown == 1

    fake_scheduler.advance(1)
    state = controller.state
    assert state.position == 1
    assert state.current_card.item.headword == "B"
    assert state.phase is Phase.FEEDBACK

    controller.reveal()
    assert controller.record_feedback(True) == 1
    assert ledger.score_of("test-B") == 1

    fake_scheduler.advance(1)
    state = controller.state
    assert state.round_boundary_hit is True
    assert state.position == 2
    assert state.current_card.item.headword == "B"
    assert state.phase is Phase.PAUSED
    assert fake_scheduler.pending_count == 0

    controller.continue_round()
    state = controller.state
    assert state.round_boundary_hit is False
    assert state.current_card.item.headword == "C"


def test_wraparound_uses_word_store(ledger, fake_scheduler, working_set_factory):
    word_store = MagicMock()
    reshuffled = working_set_factory(["B", "A"])
    word_store.reshuffle.return_value = reshuffled
    controller = SessionController(word_store, ledger, AdvanceTimer(fake_scheduler))
    original = working_set_factory(["A", "B"])

    controller.start(original, SessionConfig(question_limit=UNLIMITED, auto_advance_enabled=False))
    controller.advance_next()
    controller.advance_next()

    word_store.reshuffle.assert_called_once_with(original)
    assert controller.working_set is reshuffled
    assert controller.state.current_card.item.headword == "B"
