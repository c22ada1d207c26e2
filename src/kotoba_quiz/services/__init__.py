"""Services layer - word list assembly, scoring and platform integrations."""

from kotoba_quiz.services.clipboard_service import ClipboardService
from kotoba_quiz.services.example_text import example_lines, speech_text_from_example
from kotoba_quiz.services.proficiency_ledger import ProficiencyLedger
from kotoba_quiz.services.settings_context import SettingsContext
from kotoba_quiz.services.settings_manager import SettingsManager
from kotoba_quiz.services.speech_service import SpeechService
from kotoba_quiz.services.word_store import WordStore

__all__ = [
	"ClipboardService",
	"ProficiencyLedger",
	"SettingsContext",
	"SettingsManager",
	"SpeechService",
	"WordStore",
	"example_lines",
	"speech_text_from_example",
]
