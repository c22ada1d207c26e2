"""Word List Panel - sidebar listing the cards of the working set."""

from typing import Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QAbstractItemView, QLabel, QListWidget, QVBoxLayout, QWidget

from kotoba_quiz.core import DisplayMode, StudyCard


def display_text(card: StudyCard, mode: DisplayMode, index: int) -> str:
    """Sidebar label for a card; never gives away the answer of the question."""
    item = card.item
    if mode in (DisplayMode.CHINESE, DisplayMode.DICTIONARY):
        return item.translation or item.headword
    if mode is DisplayMode.LISTENING:
        return f"Question {index + 1}"
    return item.headword


class WordListPanel(QWidget):
    """Shows the working set and lets the user jump to any card.

    Signals:
        item_selected: Position clicked by the user.
    """

    item_selected = Signal(int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._updating = False
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        header = QLabel("Word list")
        header.setStyleSheet("QLabel { font-weight: bold; }")
        layout.addWidget(header)

        self.list_widget = QListWidget()
        self.list_widget.setSelectionMode(QAbstractItemView.SingleSelection)
        self.list_widget.currentRowChanged.connect(self._on_current_row_changed)
        layout.addWidget(self.list_widget)

        self.setFixedWidth(220)

    def display_cards(self, cards: Sequence[StudyCard], mode: DisplayMode):
        self._updating = True
        self.list_widget.clear()
        for index, card in enumerate(cards):
            self.list_widget.addItem(display_text(card, mode, index))
        self._updating = False

    def set_current_index(self, index: int):
        """Highlight a row without emitting item_selected."""
        if not (0 <= index < self.list_widget.count()):
            return
        self._updating = True
        self.list_widget.setCurrentRow(index)
        self.list_widget.scrollToItem(self.list_widget.item(index))
        self._updating = False

    def clear(self):
        self._updating = True
        self.list_widget.clear()
        self._updating = False

    def _on_current_row_changed(self, row: int):
        if not self._updating and row >= 0:
            self.item_selected.emit(row)
