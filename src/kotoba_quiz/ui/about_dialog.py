"""About Dialog."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDialog, QDialogButtonBox, QLabel, QVBoxLayout

from kotoba_quiz import __version__

ABOUT_TEXT = """
<h3>Kotoba Quiz</h3>
<p>A small Japanese travel vocabulary companion.</p>
<p><b>Tip:</b> start in <i>Dictionary</i> mode to practise pronunciation,
or show the word on screen to the person you are talking to.</p>
<p><b>Note:</b> the word lists were generated with machine help and contain
occasional mistakes. Double-check anything important.</p>
"""


class AboutDialog(QDialog):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("About Kotoba Quiz")

        layout = QVBoxLayout(self)

        text_label = QLabel(ABOUT_TEXT)
        text_label.setWordWrap(True)
        text_label.setTextFormat(Qt.RichText)
        layout.addWidget(text_label)

        version_label = QLabel(f"- v. {__version__} -")
        version_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(version_label)

        buttons = QDialogButtonBox(QDialogButtonBox.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
