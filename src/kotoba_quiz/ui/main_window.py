"""Main Window - Application shell with menus and keyboard shortcuts."""

from typing_extensions import override

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QAction, QKeyEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QMessageBox,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)


class MainWindow(QMainWindow):
    """Provides the application shell, view switching and keyboard shortcut handling."""

    settings_requested = Signal()
    about_requested = Signal()
    # Keyboard navigation while a session is shown
    next_requested = Signal()
    previous_requested = Signal()
    reveal_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Kotoba Quiz")
        self.setGeometry(100, 100, 1000, 760)

        self._setup_view = None
        self._quiz_view = None

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the stacked layout holding setup and quiz views."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)

        self.stack = QStackedWidget()
        self.main_layout.addWidget(self.stack)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")

        settings_action = QAction("&Settings...", self)
        settings_action.setShortcut("Ctrl+,")
        settings_action.triggered.connect(self.settings_requested.emit)
        file_menu.addAction(settings_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        help_menu = menu_bar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.triggered.connect(self.about_requested.emit)
        help_menu.addAction(about_action)

    def set_views(self, setup_screen: QWidget, card_panel: QWidget, word_list_panel: QWidget):
        """Install the setup screen and the quiz view (word list beside the card)."""
        self._setup_view = setup_screen
        self.stack.addWidget(setup_screen)

        quiz_view = QWidget()
        quiz_layout = QHBoxLayout(quiz_view)
        quiz_layout.setContentsMargins(0, 0, 0, 0)
        quiz_layout.addWidget(word_list_panel)
        quiz_layout.addWidget(card_panel, stretch=1)
        self._quiz_view = quiz_view
        self.stack.addWidget(quiz_view)

    def display_setup_view(self):
        if self._setup_view is not None:
            self.stack.setCurrentWidget(self._setup_view)

    def display_quiz_view(self):
        if self._quiz_view is not None:
            self.stack.setCurrentWidget(self._quiz_view)

    def is_quiz_view_visible(self) -> bool:
        return self._quiz_view is not None and self.stack.currentWidget() is self._quiz_view

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def show_info(self, title: str, message: str):
        """Display an information message to the user."""
        QMessageBox.information(self, title, message)

    @override
    def keyPressEvent(self, event: QKeyEvent):
        """Handle keyboard events while studying.

        - Right arrow: next card
        - Left arrow: previous card
        - Space: show answer
        """
        if not self.is_quiz_view_visible():
            super().keyPressEvent(event)
            return

        if event.key() == Qt.Key.Key_Right:
            self.next_requested.emit()
        elif event.key() == Qt.Key.Key_Left:
            self.previous_requested.emit()
        elif event.key() == Qt.Key.Key_Space:
            self.reveal_requested.emit()
        else:
            super().keyPressEvent(event)
