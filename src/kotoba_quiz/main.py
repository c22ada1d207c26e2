"""Main entry point for the Kotoba Quiz application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from kotoba_quiz.coordinators import AdvanceTimer, QtScheduler, QuizCoordinator, SessionController
from kotoba_quiz.io import CategorySource, ScoreRepository, SettingsStore
from kotoba_quiz.services import (
    ClipboardService,
    ProficiencyLedger,
    SettingsContext,
    SettingsManager,
    SpeechService,
    WordStore,
)
from kotoba_quiz.ui import CardPanel, MainWindow, SetupScreen, WordListPanel


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings_manager = SettingsManager()
    logging.basicConfig(
        level=settings_manager.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("kotoba_quiz")

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Kotoba Quiz")
    app.setOrganizationName("KotobaQuiz")

    # 3. Initialize Infrastructure
    category_source = CategorySource(settings_manager.data_dir())
    score_repository = ScoreRepository(settings_manager.scores_path())
    score_repository.ensure_schema()
    settings_store = SettingsStore(settings_manager.settings_path())
    logger.info("Word lists: %s", settings_manager.data_dir())
    logger.info("User data: %s", settings_manager.user_dir())

    # 4. Services
    word_store = WordStore(category_source)
    ledger = ProficiencyLedger(score_repository)
    settings = SettingsContext(settings_store)
    speech_service = SpeechService()
    clipboard_service = ClipboardService()

    # 5. Construct UI
    main_window = MainWindow()
    setup_screen = SetupScreen()
    card_panel = CardPanel()
    word_list_panel = WordListPanel()
    main_window.set_views(setup_screen, card_panel, word_list_panel)

    # 6. Session state machine and coordinator (Dependency Injection)
    controller = SessionController(
        word_store=word_store,
        ledger=ledger,
        advance_timer=AdvanceTimer(QtScheduler(app)),
    )
    coordinator = QuizCoordinator(
        main_window=main_window,
        setup_screen=setup_screen,
        card_panel=card_panel,
        word_list_panel=word_list_panel,
        controller=controller,
        category_source=category_source,
        word_store=word_store,
        ledger=ledger,
        settings=settings,
        speech_service=speech_service,
        clipboard_service=clipboard_service,
    )

    # 7. Show UI and start event loop
    coordinator.show_setup()
    main_window.show()

    try:
        return app.exec()
    finally:
        controller.reset()
        score_repository.close()


if __name__ == "__main__":
    sys.exit(main())
