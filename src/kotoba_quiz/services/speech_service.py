"""Speech Service - fire-and-forget Japanese text-to-speech."""

import logging
from typing import List, Optional

from PySide6.QtCore import QLocale
from PySide6.QtTextToSpeech import QTextToSpeech

logger = logging.getLogger(__name__)

JAPANESE_LOCALE = QLocale(QLocale.Language.Japanese, QLocale.Territory.Japan)


class SpeechService:
    """Wraps QTextToSpeech for the Japanese locale.

    The engine is created on first use so the application starts even when
    no speech backend is installed; in that case speak() only logs.
    """

    def __init__(self, engine: Optional[QTextToSpeech] = None):
        self._engine = engine
        self._engine_failed = False
        self._preferred_voice: Optional[str] = None

    def speak(self, text: Optional[str]) -> None:
        """Queue text for speech. Never raises and never blocks."""
        if not text:
            return
        engine = self._get_engine()
        if engine is None:
            logger.info("Speech unavailable, skipped: %s", text)
            return
        engine.stop()
        engine.say(text)

    def available_voices(self) -> List[str]:
        """Names of the voices that can speak Japanese."""
        engine = self._get_engine()
        if engine is None:
            return []
        return [voice.name() for voice in engine.availableVoices()]

    def set_preferred_voice(self, voice_name: Optional[str]) -> None:
        """Select a voice by name; None or an unknown name keeps the engine default."""
        self._preferred_voice = voice_name
        engine = self._get_engine()
        if engine is None or not voice_name:
            return
        for voice in engine.availableVoices():
            if voice.name() == voice_name:
                engine.setVoice(voice)
                return
        logger.warning("Voice %r not found, using default voice", voice_name)

    @property
    def preferred_voice(self) -> Optional[str]:
        return self._preferred_voice

    def _get_engine(self) -> Optional[QTextToSpeech]:
        if self._engine is None and not self._engine_failed:
            engine = QTextToSpeech()
            if engine.state() == QTextToSpeech.State.Error:
                logger.warning("Text-to-speech engine failed to initialise")
                self._engine_failed = True
                return None
            engine.setLocale(JAPANESE_LOCALE)
            self._engine = engine
        return self._engine
