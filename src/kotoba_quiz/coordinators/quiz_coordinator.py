"""Quiz Coordinator - Orchestrates setup, the study session and its collaborators."""

import logging
from typing import List, Optional

from PySide6.QtCore import QObject, Slot

from kotoba_quiz.core import CategoryManifest, DataUnavailable, DisplayMode, SessionState
from kotoba_quiz.io import CategorySource
from kotoba_quiz.services import (
    ClipboardService,
    ProficiencyLedger,
    SettingsContext,
    SpeechService,
    WordStore,
    speech_text_from_example,
)
from kotoba_quiz.ui import (
    AboutDialog,
    CardPanel,
    MainWindow,
    SettingsDialog,
    SetupScreen,
    WordListPanel,
)

from .session_controller import SessionController

logger = logging.getLogger(__name__)


class QuizCoordinator(QObject):
    """Connects the widgets with the session controller and platform services.

    Responsibilities:
    - Load the manifest and show the setup screen
    - Build the working set and start a session with the current settings
    - Redraw the card panel and word list on every state change
    - Route speech, clipboard, settings and about actions
    - Tear the session down when returning to setup
    """

    def __init__(
        self,
        main_window: MainWindow,
        setup_screen: SetupScreen,
        card_panel: CardPanel,
        word_list_panel: WordListPanel,
        controller: SessionController,
        category_source: CategorySource,
        word_store: WordStore,
        ledger: ProficiencyLedger,
        settings: SettingsContext,
        speech_service: SpeechService,
        clipboard_service: ClipboardService,
    ):
        super().__init__()

        if main_window is None:
            raise ValueError("MainWindow must not be None")
        if controller is None:
            raise ValueError("SessionController must not be None")
        if word_store is None:
            raise ValueError("WordStore must not be None")
        if settings is None:
            raise ValueError("SettingsContext must not be None")

        self.main_window = main_window
        self.setup_screen = setup_screen
        self.card_panel = card_panel
        self.word_list_panel = word_list_panel
        self.controller = controller
        self.category_source = category_source
        self.word_store = word_store
        self.ledger = ledger
        self.settings = settings
        self.speech_service = speech_service
        self.clipboard_service = clipboard_service

        # Manifest shown on the setup screen; supplies per-category sample sizes
        self._manifest: Optional[CategoryManifest] = None
        # Last card spoken automatically in listening mode
        self._last_announced: Optional[tuple] = None

        self._connect_signals()

    def _connect_signals(self):
        self.setup_screen.start_requested.connect(self.handle_start_requested)

        self.controller.state_changed.connect(self.handle_state_changed)
        self.controller.working_set_changed.connect(self.handle_working_set_changed)
        self.controller.countdown_changed.connect(self.handle_countdown_changed)

        self.card_panel.reveal_clicked.connect(self.controller.reveal)
        self.card_panel.correct_clicked.connect(self.handle_correct)
        self.card_panel.incorrect_clicked.connect(self.handle_incorrect)
        self.card_panel.next_clicked.connect(self.controller.advance_next)
        self.card_panel.previous_clicked.connect(self.controller.advance_previous)
        self.card_panel.stop_clicked.connect(self.controller.stop_countdown)
        self.card_panel.continue_clicked.connect(self.controller.continue_round)
        self.card_panel.reshuffle_clicked.connect(self.controller.reshuffle_round)
        self.card_panel.home_clicked.connect(self.handle_go_home)
        self.card_panel.speak_word_clicked.connect(self.handle_speak_word)
        self.card_panel.speak_example_clicked.connect(self.handle_speak_example)
        self.card_panel.copy_requested.connect(self.handle_copy_requested)

        self.word_list_panel.item_selected.connect(self.handle_item_selected)

        self.main_window.settings_requested.connect(self.handle_settings_requested)
        self.main_window.about_requested.connect(self.handle_about_requested)
        self.main_window.next_requested.connect(self.controller.advance_next)
        self.main_window.previous_requested.connect(self.controller.advance_previous)
        self.main_window.reveal_requested.connect(self.controller.reveal)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def show_setup(self):
        """Load the manifest and display the setup screen."""
        try:
            manifest = self.category_source.fetch_manifest()
        except DataUnavailable as e:
            logger.error("Manifest unavailable: %s", e)
            self.main_window.show_error(
                "Word Lists Unavailable",
                f"The list of word lists could not be loaded.\n{e.reason}",
            )
        else:
            self._manifest = manifest
            self.setup_screen.display_manifest(manifest)
        self.main_window.display_setup_view()

    @Slot(list, str)
    def handle_start_requested(self, category_ids: List[str], mode_value: str):
        """Build the working set and start a session.

        Nothing is started when a category fails to load.
        """
        if not category_ids:
            self.main_window.show_error("No Word List", "Select at least one word list.")
            return

        mode = DisplayMode(mode_value)
        try:
            working_set = self.word_store.build(category_ids, mode, self._sample_sizes())
        except DataUnavailable as e:
            logger.error("Cannot start session: %s", e)
            self.main_window.show_error(
                "Word List Unavailable",
                f"Could not load word list '{e.source}'. Please try again later.\n{e.reason}",
            )
            return

        config = self.settings.session_config()
        self.speech_service.set_preferred_voice(config.voice_preference)
        self._last_announced = None
        self.controller.start(working_set, config)
        self.main_window.display_quiz_view()

    def _sample_sizes(self):
        return self._manifest.sample_sizes() if self._manifest is not None else {}

    @Slot()
    def handle_go_home(self):
        self.controller.reset()
        self.word_list_panel.clear()
        self.show_setup()

    # ------------------------------------------------------------------
    # Session updates
    # ------------------------------------------------------------------

    @Slot(object)
    def handle_state_changed(self, state: SessionState):
        working_set = self.controller.working_set
        if working_set is None or state.current_card is None:
            self.card_panel.show_empty()
            return

        score = self.ledger.score_of(state.current_card.identity)
        self.card_panel.display_state(state, working_set.mode, score)
        if not state.round_boundary_hit:
            self.word_list_panel.set_current_index(state.position)

        if working_set.mode is DisplayMode.LISTENING:
            self._announce(state)

    @Slot(object)
    def handle_countdown_changed(self, remaining):
        self.card_panel.set_countdown(remaining)

    @Slot(object)
    def handle_working_set_changed(self, working_set):
        self.word_list_panel.display_cards(working_set.cards, working_set.mode)

    def _announce(self, state: SessionState):
        """Speak each new listening question once."""
        if state.answer_revealed or state.round_boundary_hit:
            return
        key = (id(self.controller.working_set), state.position)
        if key == self._last_announced:
            return
        self._last_announced = key
        self.speech_service.speak(state.current_card.item.headword)

    # ------------------------------------------------------------------
    # Card actions
    # ------------------------------------------------------------------

    @Slot()
    def handle_correct(self):
        self._record_feedback(True)

    @Slot()
    def handle_incorrect(self):
        self._record_feedback(False)

    def _record_feedback(self, correct: bool):
        try:
            self.controller.record_feedback(correct)
        except RuntimeError as e:
            logger.error("Saving score failed: %s", e)
            self.main_window.show_error("Score Not Saved", str(e))

    @Slot(int)
    def handle_item_selected(self, index: int):
        working_set = self.controller.working_set
        if working_set is not None and 0 <= index < len(working_set):
            self.controller.jump_to(index)

    @Slot()
    def handle_speak_word(self):
        card = self.controller.state.current_card
        if card is not None:
            self.speech_service.speak(card.item.headword)

    @Slot()
    def handle_speak_example(self):
        card = self.controller.state.current_card
        if card is not None:
            self.speech_service.speak(speech_text_from_example(card.item.example_target))

    @Slot(str)
    def handle_copy_requested(self, text: str):
        self.clipboard_service.copy_text(text)

    # ------------------------------------------------------------------
    # Dialogs
    # ------------------------------------------------------------------

    @Slot()
    def handle_settings_requested(self):
        dialog = SettingsDialog(
            self.settings.session_config(),
            self.speech_service.available_voices(),
            self.main_window,
        )
        if dialog.exec() != SettingsDialog.Accepted:
            return
        self.apply_settings(dialog.config())

    def apply_settings(self, config):
        """Persist new settings; a running session keeps its own snapshot."""
        try:
            self.settings.update(config)
        except RuntimeError as e:
            logger.error("Saving settings failed: %s", e)
            self.main_window.show_error("Settings Not Saved", str(e))
            return
        if self.controller.is_active:
            self.main_window.show_info(
                "Settings Saved", "The new settings apply from the next session."
            )

    @Slot()
    def handle_about_requested(self):
        AboutDialog(self.main_window).exec()
