"""Card Panel - shows the current card and the controls for its answer phase."""

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from kotoba_quiz.core import DisplayMode, Phase, SessionState, StudyCard
from kotoba_quiz.services import example_lines


class CardPanel(QWidget):
    """Renders one card in any display mode.

    The panel holds no session logic: it is redrawn from a SessionState and
    reports button presses through signals.
    """

    reveal_clicked = Signal()
    correct_clicked = Signal()
    incorrect_clicked = Signal()
    next_clicked = Signal()
    previous_clicked = Signal()
    stop_clicked = Signal()
    continue_clicked = Signal()
    reshuffle_clicked = Signal()
    home_clicked = Signal()
    speak_word_clicked = Signal()
    speak_example_clicked = Signal()
    copy_requested = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._card: Optional[StudyCard] = None
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)

        header_row = QHBoxLayout()
        self.counter_label = QLabel("")
        header_row.addWidget(self.counter_label)
        header_row.addStretch()
        self.score_label = QLabel("")
        header_row.addWidget(self.score_label)
        layout.addLayout(header_row)

        # Question
        self.question_label = QLabel("")
        self.question_label.setAlignment(Qt.AlignCenter)
        self.question_label.setStyleSheet("QLabel { font-size: 48px; }")
        layout.addWidget(self.question_label)

        self.listen_button = QPushButton("Play sound")
        self.listen_button.clicked.connect(self.speak_word_clicked.emit)
        layout.addWidget(self.listen_button)

        self.reveal_button = QPushButton("Show answer")
        self.reveal_button.clicked.connect(self.reveal_clicked.emit)
        layout.addWidget(self.reveal_button)

        # Answer
        self.answer_frame = QFrame()
        answer_layout = QVBoxLayout(self.answer_frame)

        self.headword_label = QLabel("")
        self.headword_label.setStyleSheet("QLabel { font-size: 36px; }")
        self.reading_label = QLabel("")
        self.reading_label.setStyleSheet("QLabel { font-size: 24px; }")
        self.romanization_label = QLabel("")
        self.translation_label = QLabel("")
        for label in (
            self.headword_label,
            self.reading_label,
            self.romanization_label,
            self.translation_label,
        ):
            label.setAlignment(Qt.AlignCenter)
            label.setTextInteractionFlags(Qt.TextSelectableByMouse)
            answer_layout.addWidget(label)

        word_buttons = QHBoxLayout()
        self.speak_word_button = QPushButton("Speak word")
        self.speak_word_button.clicked.connect(self.speak_word_clicked.emit)
        word_buttons.addWidget(self.speak_word_button)
        self.copy_word_button = QPushButton("Copy")
        self.copy_word_button.clicked.connect(self._on_copy_word)
        word_buttons.addWidget(self.copy_word_button)
        answer_layout.addLayout(word_buttons)

        self.example_label = QLabel("")
        self.example_label.setWordWrap(True)
        self.example_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        answer_layout.addWidget(self.example_label)
        self.example_translation_label = QLabel("")
        self.example_translation_label.setWordWrap(True)
        answer_layout.addWidget(self.example_translation_label)

        example_buttons = QHBoxLayout()
        self.speak_example_button = QPushButton("Speak example")
        self.speak_example_button.clicked.connect(self.speak_example_clicked.emit)
        example_buttons.addWidget(self.speak_example_button)
        self.copy_example_button = QPushButton("Copy example")
        self.copy_example_button.clicked.connect(self._on_copy_example)
        example_buttons.addWidget(self.copy_example_button)
        answer_layout.addLayout(example_buttons)

        layout.addWidget(self.answer_frame)

        # Phase controls
        controls = QHBoxLayout()
        self.correct_button = QPushButton("Correct!")
        self.correct_button.clicked.connect(self.correct_clicked.emit)
        controls.addWidget(self.correct_button)
        self.incorrect_button = QPushButton("Wrong")
        self.incorrect_button.clicked.connect(self.incorrect_clicked.emit)
        controls.addWidget(self.incorrect_button)
        self.stop_button = QPushButton("Stop countdown")
        self.stop_button.clicked.connect(self.stop_clicked.emit)
        controls.addWidget(self.stop_button)
        self.previous_button = QPushButton("Previous")
        self.previous_button.clicked.connect(self.previous_clicked.emit)
        controls.addWidget(self.previous_button)
        self.next_button = QPushButton("Next")
        self.next_button.clicked.connect(self.next_clicked.emit)
        controls.addWidget(self.next_button)
        layout.addLayout(controls)

        # End of round
        self.round_end_frame = QFrame()
        round_layout = QVBoxLayout(self.round_end_frame)
        self.round_end_label = QLabel("Round complete!")
        self.round_end_label.setAlignment(Qt.AlignCenter)
        round_layout.addWidget(self.round_end_label)
        round_buttons = QHBoxLayout()
        self.continue_button = QPushButton("Continue")
        self.continue_button.clicked.connect(self.continue_clicked.emit)
        round_buttons.addWidget(self.continue_button)
        self.reshuffle_button = QPushButton("Reshuffle")
        self.reshuffle_button.clicked.connect(self.reshuffle_clicked.emit)
        round_buttons.addWidget(self.reshuffle_button)
        round_layout.addLayout(round_buttons)
        layout.addWidget(self.round_end_frame)

        self.empty_label = QLabel("No words in these word lists can be shown in this mode.")
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setWordWrap(True)
        layout.addWidget(self.empty_label)

        layout.addStretch()

        self.home_button = QPushButton("Back to start")
        self.home_button.clicked.connect(self.home_clicked.emit)
        layout.addWidget(self.home_button)

        self.show_empty()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def display_state(self, state: SessionState, mode: DisplayMode, score: int):
        """Redraw the panel for a session state."""
        if state.current_card is None:
            self.show_empty()
            return

        self._card = state.current_card
        item = state.current_card.item
        practice = mode.is_practice
        answer_visible = state.answer_revealed or not practice

        self.empty_label.hide()
        self.counter_label.setText(f"{state.position + 1} / {state.total}")
        self.score_label.setText(f"Proficiency: {score}" if practice else "")
        self.score_label.setVisible(practice)

        if mode is DisplayMode.CHINESE:
            self.question_label.setText(item.translation or "")
        elif mode is DisplayMode.KANJI:
            self.question_label.setText(item.headword)
        else:
            self.question_label.setText("")
        self.question_label.setVisible(mode in (DisplayMode.CHINESE, DisplayMode.KANJI))
        self.listen_button.setVisible(mode is DisplayMode.LISTENING and not state.answer_revealed)
        self.reveal_button.setVisible(practice and not state.answer_revealed)

        self._fill_answer()
        self.answer_frame.setVisible(answer_visible)

        in_round_end = state.round_boundary_hit
        judging = practice and state.answer_revealed and not in_round_end
        self.correct_button.setVisible(judging and state.phase is Phase.FEEDBACK)
        self.incorrect_button.setVisible(judging and state.phase is Phase.FEEDBACK)
        self.stop_button.setVisible(judging and state.phase is Phase.COUNTDOWN)
        self.next_button.setVisible(
            not in_round_end and (not practice or (judging and state.phase is not Phase.COUNTDOWN))
        )
        self.previous_button.setVisible(not practice)
        self.round_end_frame.setVisible(in_round_end)
        self.set_countdown(state.countdown)

    def set_countdown(self, remaining: Optional[int]):
        if remaining is None:
            self.stop_button.setText("Stop countdown")
        else:
            self.stop_button.setText(f"Stop countdown ({remaining})")

    def show_empty(self):
        """Show the 'nothing to study' state."""
        self._card = None
        self.counter_label.setText("")
        self.score_label.hide()
        self.question_label.hide()
        self.listen_button.hide()
        self.reveal_button.hide()
        self.answer_frame.hide()
        for button in (
            self.correct_button,
            self.incorrect_button,
            self.stop_button,
            self.previous_button,
            self.next_button,
        ):
            button.hide()
        self.round_end_frame.hide()
        self.empty_label.show()

    def _fill_answer(self):
        item = self._card.item
        self.headword_label.setText(item.headword)
        self.reading_label.setText(item.reading)
        self.romanization_label.setText(item.romanization or "")
        self.romanization_label.setVisible(bool(item.romanization))
        self.translation_label.setText(item.translation or "")
        self.translation_label.setVisible(bool(item.translation))

        lines = example_lines(item.example_target)
        self.example_label.setText("\n".join(lines))
        self.example_label.setVisible(bool(lines))
        translation_lines = example_lines(item.example_translation)
        self.example_translation_label.setText("\n".join(translation_lines))
        self.example_translation_label.setVisible(bool(translation_lines))
        self.speak_example_button.setVisible(bool(lines))
        self.copy_example_button.setVisible(bool(lines))

    def _on_copy_word(self):
        if self._card is not None:
            self.copy_requested.emit(self._card.item.headword)

    def _on_copy_example(self):
        if self._card is not None:
            self.copy_requested.emit("\n".join(example_lines(self._card.item.example_target)))
