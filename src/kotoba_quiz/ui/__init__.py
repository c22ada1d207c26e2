"""UI layer - PySide6 presentation components."""

from .about_dialog import AboutDialog
from .card_panel import CardPanel
from .main_window import MainWindow
from .settings_dialog import SettingsDialog
from .setup_screen import SetupScreen
from .word_list_panel import WordListPanel

__all__ = [
    "AboutDialog",
    "CardPanel",
    "MainWindow",
    "SettingsDialog",
    "SetupScreen",
    "WordListPanel",
]
