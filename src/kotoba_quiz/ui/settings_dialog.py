"""Settings Dialog - edits the configuration used by the next session."""

from typing import Optional, Sequence

from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QSpinBox,
    QVBoxLayout,
)

from kotoba_quiz.core import (
    MAX_DELAY_SECONDS,
    MAX_QUESTION_LIMIT,
    UNLIMITED,
    SessionConfig,
)
from kotoba_quiz.core.session_config import MIN_DELAY_SECONDS, MIN_QUESTION_LIMIT

DEFAULT_VOICE_LABEL = "System default"


class SettingsDialog(QDialog):
    """Form for question limit, auto-advance and voice preference."""

    def __init__(self, config: SessionConfig, voices: Sequence[str] = (), parent=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self._initial = config
        self._setup_ui(voices)
        self._load(config)

    def _setup_ui(self, voices: Sequence[str]):
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.question_limit_spin = QSpinBox()
        self.question_limit_spin.setRange(MIN_QUESTION_LIMIT, MAX_QUESTION_LIMIT)
        form.addRow(f"Questions per round ({MIN_QUESTION_LIMIT}-{MAX_QUESTION_LIMIT})", self.question_limit_spin)

        self.unlimited_check = QCheckBox("No limit")
        self.unlimited_check.toggled.connect(self.question_limit_spin.setDisabled)
        form.addRow("", self.unlimited_check)

        self.auto_advance_check = QCheckBox("Go to the next word automatically after answering")
        form.addRow("Auto advance", self.auto_advance_check)

        self.delay_spin = QSpinBox()
        self.delay_spin.setRange(MIN_DELAY_SECONDS, MAX_DELAY_SECONDS)
        self.delay_spin.setSuffix(" s")
        self.auto_advance_check.toggled.connect(self.delay_spin.setEnabled)
        form.addRow(f"Delay ({MIN_DELAY_SECONDS}-{MAX_DELAY_SECONDS} s)", self.delay_spin)

        self.voice_combo = QComboBox()
        self.voice_combo.addItem(DEFAULT_VOICE_LABEL, None)
        for voice in voices:
            self.voice_combo.addItem(voice, voice)
        form.addRow("Voice", self.voice_combo)

        layout.addLayout(form)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _load(self, config: SessionConfig):
        self.unlimited_check.setChecked(config.is_unlimited)
        self.question_limit_spin.setValue(
            self._initial_limit(config)
        )
        self.question_limit_spin.setDisabled(config.is_unlimited)
        self.auto_advance_check.setChecked(config.auto_advance_enabled)
        self.delay_spin.setValue(config.auto_advance_delay_seconds)
        self.delay_spin.setEnabled(config.auto_advance_enabled)

        index = self.voice_combo.findData(config.voice_preference)
        self.voice_combo.setCurrentIndex(index if index >= 0 else 0)

    @staticmethod
    def _initial_limit(config: SessionConfig) -> int:
        return SessionConfig().question_limit if config.is_unlimited else config.question_limit

    def config(self) -> SessionConfig:
        """The configuration currently entered in the form."""
        voice: Optional[str] = self.voice_combo.currentData()
        return self._initial.with_changes(
            question_limit=UNLIMITED if self.unlimited_check.isChecked() else self.question_limit_spin.value(),
            auto_advance_enabled=self.auto_advance_check.isChecked(),
            auto_advance_delay_seconds=self.delay_spin.value(),
            voice_preference=voice,
        )
